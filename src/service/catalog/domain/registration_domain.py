"""
Seller registration form and its local validation.

The form moves through

    EMPTY -> FILLING -> VALIDATING -> SUBMITTING -> SUCCESS | FAILED

Local rules run in a fixed order and stop at the first failure. A local
failure sends the form back to FILLING so the seller can correct it; only a
failure after submission (identifier taken, account service error) is FAILED.
"""

from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError, ValidationError
from src.service.catalog.domain.identifier_domain import (
    IDENTIFIER_MIN_LENGTH,
    is_well_formed_identifier,
    normalize_identifier,
)
from src.service.catalog.domain.whatsapp_link_domain import normalize_phone


PHONE_MIN_DIGITS = 10
PASSWORD_MIN_LENGTH = 6


class RegistrationState(StrEnum):
    EMPTY = 'empty'
    FILLING = 'filling'
    VALIDATING = 'validating'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    FAILED = 'failed'


_ALLOWED_TRANSITIONS: dict[RegistrationState, set[RegistrationState]] = {
    RegistrationState.EMPTY: {RegistrationState.FILLING},
    RegistrationState.FILLING: {RegistrationState.FILLING, RegistrationState.VALIDATING},
    RegistrationState.VALIDATING: {RegistrationState.FILLING, RegistrationState.SUBMITTING},
    RegistrationState.SUBMITTING: {RegistrationState.SUCCESS, RegistrationState.FAILED},
    RegistrationState.SUCCESS: set(),
    RegistrationState.FAILED: {RegistrationState.FILLING},
}


@attrs.frozen
class ValidatedRegistration:
    username: str
    email: str
    password: str = attrs.field(repr=False)
    phone: Optional[str]
    display_name: Optional[str]


@attrs.define
class RegistrationForm:
    username: str = ''
    email: str = ''
    password: str = attrs.field(default='', repr=False)
    phone: str = ''
    display_name: str = ''
    state: RegistrationState = RegistrationState.EMPTY
    error: Optional[str] = None

    def _move_to(self, new_state: RegistrationState) -> None:
        if new_state not in _ALLOWED_TRANSITIONS[self.state]:
            raise DomainError(f'Invalid registration transition: {self.state} -> {new_state}')
        self.state = new_state

    def fill(
        self,
        *,
        username: str,
        email: str,
        password: str,
        phone: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> None:
        self._move_to(RegistrationState.FILLING)
        self.username = username
        self.email = email
        self.password = password
        self.phone = phone or ''
        self.display_name = display_name or ''
        self.error = None

    def validate(self) -> ValidatedRegistration:
        self._move_to(RegistrationState.VALIDATING)
        try:
            validated = validate_registration(
                username=self.username,
                email=self.email,
                password=self.password,
                phone=self.phone,
                display_name=self.display_name,
            )
        except ValidationError as e:
            self.error = e.message
            self._move_to(RegistrationState.FILLING)
            raise
        self._move_to(RegistrationState.SUBMITTING)
        return validated

    def succeed(self) -> None:
        self._move_to(RegistrationState.SUCCESS)

    def fail(self, message: str) -> None:
        self.error = message
        self._move_to(RegistrationState.FAILED)


def validate_registration(
    *,
    username: str,
    email: str,
    password: str,
    phone: Optional[str] = None,
    display_name: Optional[str] = None,
) -> ValidatedRegistration:
    if not username.strip() or not email.strip() or not password:
        raise ValidationError('Preencha todos os campos obrigatórios')

    phone_digits = normalize_phone(phone)
    if phone and phone.strip() and len(phone_digits) < PHONE_MIN_DIGITS:
        raise ValidationError('Telefone inválido. Use DDD + número.', field='phone')

    identifier = normalize_identifier(username.strip())
    if len(identifier) < IDENTIFIER_MIN_LENGTH:
        raise ValidationError('Username deve ter pelo menos 3 caracteres', field='username')

    if not is_well_formed_identifier(identifier):
        raise ValidationError('Username pode conter apenas letras, números e _', field='username')

    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError('Senha deve ter pelo menos 6 caracteres', field='password')

    return ValidatedRegistration(
        username=identifier,
        email=email.strip(),
        password=password,
        phone=phone_digits or None,
        display_name=(display_name or '').strip() or None,
    )
