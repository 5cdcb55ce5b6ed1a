"""
gitwebhooks receiver service - Main application entry point.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from .config import Settings, settings
from .factory import WebhookParserFactory
from .logger import logger, setup_logging
from .webhook import GitProvider, WebhookHandler
from .webhook.options import basic_auth, hook_uuid, secret


# Global instances
webhook_handler: WebhookHandler = None


def build_handler(app_settings: Settings) -> WebhookHandler:
    """Create a handler with one parser per configured provider."""
    handler = WebhookHandler()

    secrets = {
        GitProvider.GITHUB: app_settings.github_secret,
        GitProvider.GITLAB: app_settings.gitlab_secret,
        GitProvider.GITEA: app_settings.gitea_secret,
        GitProvider.GITEE: app_settings.gitee_secret,
        GitProvider.GOGS: app_settings.gogs_secret,
        GitProvider.BITBUCKET_SERVER: app_settings.bitbucket_server_secret,
    }
    for provider, value in secrets.items():
        handler.register(WebhookParserFactory.create(provider, secret(value)))

    if app_settings.bitbucket_uuid:
        handler.register(
            WebhookParserFactory.create(GitProvider.BITBUCKET, hook_uuid(app_settings.bitbucket_uuid))
        )
    else:
        logger.warning("BITBUCKET_UUID not set, Bitbucket Cloud endpoint disabled")

    handler.register(
        WebhookParserFactory.create(
            GitProvider.AZURE_DEVOPS,
            basic_auth(app_settings.azure_username, app_settings.azure_password),
        )
    )

    if app_settings.dockerhub_enabled:
        handler.register(WebhookParserFactory.create(GitProvider.DOCKERHUB))

    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global webhook_handler

    setup_logging(settings.debug)

    webhook_handler = build_handler(settings)

    async def on_event(provider, payload):
        """Log accepted deliveries."""
        logger.debug(f"{provider.value} payload: {type(payload).__name__}")

    webhook_handler.on_event(on_event)
    mounted = ", ".join(provider.value for provider in webhook_handler.providers)
    logger.info(f"Webhook handler initialized for: {mounted}")

    yield

    logger.info("Application shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Multi-provider webhook receiver",
    version=settings.app_version,
    lifespan=lifespan,
    debug=settings.debug
)


@app.post("/webhook/{provider}")
async def receive_webhook(provider: GitProvider, request: Request):
    """Webhook endpoint, one per provider."""
    return await webhook_handler.handle_webhook(request, provider)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "providers": [p.value for p in webhook_handler.providers] if webhook_handler else [],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gitwebhooks.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
