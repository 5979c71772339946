"""
Main entry point for the ID token verifier service.
"""
from dotenv import load_dotenv
import uvicorn
from idtoken_verifier.app import create_app
from idtoken_verifier.settings import get_settings

# Load environment variables from a .env file if present
load_dotenv()

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Main entry point for running the application."""
    s = get_settings()
    if not s.jwks.url and not s.jwks.allow_url_override:
        print(
            "[idtoken-verifier] No JWKS endpoint configured. Set IDTOKEN_VERIFIER_JWKS__URL "
            "or IDTOKEN_VERIFIER_JWKS__ALLOW_URL_OVERRIDE=true."
        )

    uvicorn.run(
        "idtoken_verifier.main:app",
        host=s.server.host,
        port=s.server.port,
        reload=s.server.reload,
        log_level=s.server.log_level,
    )


if __name__ == "__main__":
    main()
