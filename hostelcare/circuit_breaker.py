from pybreaker import CircuitBreaker
from sqlalchemy.exc import IntegrityError

# Circuit breaker guarding writes to the store. Constraint violations and
# model validation errors are client mistakes, not store outages.
store_circuit_breaker = CircuitBreaker(
    fail_max=3,
    reset_timeout=60,
    exclude=[IntegrityError, ValueError],
    name="store_breaker",
)
