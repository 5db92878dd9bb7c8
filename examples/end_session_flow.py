import os
import sys

# Add src to path for running directly
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from coreason_logout.config import CoreasonLogoutConfig
from coreason_logout.end_session_response import EndSessionResponseBuilder
from coreason_logout.exceptions import MalformedEnvelopeError
from coreason_logout.manager import EndSessionManager


def main() -> None:
    """
    Walks through an RP-initiated logout:
    - build and persist the request
    - dispatch URI for the user agent
    - complete from the envelope handed back by the redirect handler
    """
    print(">>> Starting End Session Example")

    config = CoreasonLogoutConfig(
        authorization_endpoint="https://auth.example.com/authorize",
        token_endpoint="https://auth.example.com/oauth/token",
        end_session_endpoint="https://auth.example.com/oidc/logout?client_id=my-app",
        post_logout_redirect_uri="com.example.app://logout-callback",
    )
    manager = EndSessionManager(config)

    request = manager.create_request()
    saved = manager.persist_request(request)
    print(f">>> Persisted request: {saved}")
    print(f">>> Send the user agent to: {manager.dispatch_uri(request)}")

    # The redirect handler rebuilds the response and hands it back in an envelope
    envelope = EndSessionResponseBuilder(request).from_uri("com.example.app://logout-callback").build().to_envelope()

    response = manager.complete(envelope, expected_request=manager.restore_request(saved))
    print(f">>> Completed: {response is not None}")

    print(f">>> Empty envelope yields: {manager.complete({})}")

    try:
        manager.complete({next(iter(envelope)): "tampered"})
    except MalformedEnvelopeError as e:
        print(f">>> Expected failure (tampered envelope): {e}")


if __name__ == "__main__":
    main()
