"""Application-layer exceptions."""


class CommunityError(Exception):
    pass


class ValidationError(CommunityError):
    """User-facing validation failure; no state was changed."""


class SessionAlreadyActiveError(CommunityError):
    pass


class UnknownActionError(CommunityError):
    pass
