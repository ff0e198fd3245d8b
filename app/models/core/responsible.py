"""Per-contract responsibles for the SESMT and management evaluations."""

RESPONSIBLE_DDL = """
CREATE TABLE IF NOT EXISTS responsible_assignment (
    contract_code VARCHAR PRIMARY KEY,
    sesmt_responsible INTEGER,
    management_responsible INTEGER
)
"""
