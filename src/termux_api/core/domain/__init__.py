"""Domain values and models.

Why:
- Plain data structures (Pydantic v2): invocations, capability parameters,
  command results and dialog variants.
- The domain knows nothing about processes; the executor does.
"""
