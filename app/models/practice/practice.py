"""Best-practice record model. Owned by the practice CRUD subsystem; read here."""

PRACTICE_DDL = """
CREATE TABLE IF NOT EXISTS practice (
    id VARCHAR PRIMARY KEY,
    title VARCHAR,
    description VARCHAR,
    contract_code VARCHAR,
    status VARCHAR,
    relevance DOUBLE,
    author_matricula INTEGER,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

PRACTICE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_practice_contract ON practice(contract_code)",
]
