from .person import InvalidQueryError, is_numeric_id, person_service

__all__ = ["InvalidQueryError", "is_numeric_id", "person_service"]
