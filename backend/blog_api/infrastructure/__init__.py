"""Infrastructure: database pool, query execution, repositories, logging.

Invariants:
    - Only this package and api/ perform IO
    - Repositories hold no mutable in-process state; one instance per request
"""
