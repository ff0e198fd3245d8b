"""User (employee) model - read for names and committee member checks."""

USER_DDL = """
CREATE TABLE IF NOT EXISTS app_user (
    matricula INTEGER PRIMARY KEY,
    name VARCHAR,
    email VARCHAR,
    contract_code VARCHAR,
    status VARCHAR DEFAULT 'active'
)
"""

USER_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_user_contract ON app_user(contract_code)",
]
