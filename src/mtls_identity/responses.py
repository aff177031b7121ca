"""Response builders for the authorizer."""

from email.headerregistry import Address

from ._types import AuthorizerResponse, IdentityContext
from .models import CommonName


def deny_response() -> AuthorizerResponse:
    """Return deny response."""
    return {"isAuthorized": False}


def allow_response(
    common_name: str, identity: CommonName, email: Address | None = None
) -> AuthorizerResponse:
    """Return allow response carrying the client identity."""
    context: IdentityContext = {
        "commonName": common_name,
        "lastName": identity.last_name,
        "firstName": identity.first_name,
        "edipi": identity.edipi,
    }
    if identity.middle_name is not None:
        context["middleName"] = identity.middle_name
    if email is not None:
        context["email"] = email.addr_spec
    return {"isAuthorized": True, "context": context}
