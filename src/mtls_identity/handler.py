"""Lambda authorizer - identifies the caller from its mTLS client certificate."""

from ._types import APIGatewayAuthorizerEventV2, AuthorizerResponse, LambdaContext
from .config import AuthorizerConfig
from .exceptions import EmailError, X509Error
from .extraction import email_from_chain
from .logging_config import configure_logger
from .producer import AuthnContext, produce_x509_identity
from .responses import allow_response, deny_response
from .subject import parse_common_name


def handler(event: APIGatewayAuthorizerEventV2, context: LambdaContext) -> AuthorizerResponse:
    """Return an authorization decision for the client certificate on the request.

    Flow:
    1. Build the chain from the mTLS context PEM or the configured header
    2. Read the primary certificate's subject and CN
    3. Decode LAST.FIRST[.MIDDLE].EDIPI from the CN
    4. Look up the SAN email (mandatory when REQUIRE_EMAIL is set)
    5. Return allow/deny decision
    """
    config = AuthorizerConfig.from_env()
    logger = configure_logger(config)

    try:
        authn = AuthnContext.from_event(event, config.cert_header)
        identity = produce_x509_identity(authn, anonymous_cn=config.anonymous_cn)
    except X509Error as e:
        logger.warning("Client certificate rejected: %s", e)
        return deny_response()

    if not identity.has_cert():
        logger.warning("No usable CN in subject: %s", identity.subject_dn)
        return deny_response()

    common_name = identity.common_name
    try:
        common_name_fields = parse_common_name(common_name)
    except X509Error as e:
        logger.warning("Unrecognised CN format: %s", e)
        return deny_response()

    email = None
    try:
        email = email_from_chain(authn.chain)
    except EmailError as e:
        if config.require_email:
            logger.warning("Email required but unavailable for CN=%s: %s", common_name, e)
            return deny_response()
        logger.info("No email for CN=%s: %s", common_name, e)

    logger.info("Authorized client CN=%s", common_name)
    return allow_response(common_name, common_name_fields, email)
