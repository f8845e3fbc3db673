class ValidationError(Exception): ...
