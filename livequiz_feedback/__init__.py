"""LiveQuiz Feedback Package — aggregation queries over quiz feedback and responses.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
