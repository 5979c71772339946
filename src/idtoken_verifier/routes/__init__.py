from idtoken_verifier.api.system import router as system_router
from idtoken_verifier.api.verify import router as verify_router

__all__ = ["system_router", "verify_router"]
