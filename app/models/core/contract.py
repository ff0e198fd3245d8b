"""Contract model."""

CONTRACT_DDL = """
CREATE TABLE IF NOT EXISTS contract (
    code VARCHAR PRIMARY KEY,
    name VARCHAR
)
"""
