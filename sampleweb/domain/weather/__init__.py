"""
Weather bounded context, domain layer.

Placeholder forecast domain used to exercise the result type:
- Forecast entity
- Domain errors
- Forecast service returning Result variants
"""
