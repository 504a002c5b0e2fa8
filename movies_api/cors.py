from typing import Iterable, Optional

# Sent back when the request carries no Origin header at all.
NO_ORIGIN_VALUE = "*"


class CorsPolicy:
    """
    Origin allow-list. Membership is literal, so a "*" entry only matches a
    request whose Origin header is the string "*".
    """
    def __init__(self, accepted_origins: Iterable[str], allowed_methods: Iterable[str]):
        self.accepted_origins = frozenset(accepted_origins)
        self.allowed_methods = ", ".join(allowed_methods)

    def allow_origin(self, origin: Optional[str]) -> Optional[str]:
        """Value for Access-Control-Allow-Origin, or None when the origin is rejected."""
        if not origin:
            return NO_ORIGIN_VALUE
        if origin in self.accepted_origins:
            return origin
        return None
