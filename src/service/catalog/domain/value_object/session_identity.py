import attrs


@attrs.frozen
class SessionIdentity:
    """The authenticated seller behind a request, passed explicitly to use cases."""

    account_id: int
    email: str
    username: str

    def matches_email(self, allowed_emails: list[str] | set[str] | frozenset[str]) -> bool:
        return self.email.strip().lower() in {email.lower() for email in allowed_emails}
