"""
Todo tracker backend package.

The domain core (value objects, Result/Effect, the Todo state machine,
commands, queries and the unit of work) has no web dependency; `tracker.main`
wraps it in a FastAPI application.
"""
