from src.service.catalog.domain.value_object.session_identity import SessionIdentity

__all__ = ['SessionIdentity']
