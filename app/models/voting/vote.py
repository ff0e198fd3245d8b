"""Committee vote model. One row per (practice, voter, round)."""

VOTE_DDL = """
CREATE TABLE IF NOT EXISTS vote (
    id VARCHAR PRIMARY KEY,
    practice_id VARCHAR NOT NULL,
    voter_matricula INTEGER NOT NULL,
    vote_round VARCHAR NOT NULL CHECK (vote_round IN ('quarterly', 'annual')),
    score INTEGER NOT NULL CHECK (score BETWEEN 15 AND 75),
    answers JSON NOT NULL,
    created_at TIMESTAMP DEFAULT current_timestamp,
    UNIQUE (practice_id, voter_matricula, vote_round)
)
"""

VOTE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_vote_practice ON vote(practice_id)",
    "CREATE INDEX IF NOT EXISTS idx_vote_voter ON vote(voter_matricula)",
]
