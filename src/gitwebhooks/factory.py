"""
Parser lookup by provider.
"""
from .azuredevops import AzureDevOpsWebhookParser
from .bitbucket import BitbucketWebhookParser
from .bitbucket_server import BitbucketServerWebhookParser
from .dockerhub import DockerHubWebhookParser
from .gitea import GiteaWebhookParser
from .gitee import GiteeWebhookParser
from .gogs import GogsWebhookParser
from .github import GitHubWebhookParser
from .gitlab import GitLabWebhookParser
from .webhook.models import GitProvider
from .webhook.options import Option
from .webhook.parser import WebhookParser


class WebhookParserFactory:
    """Factory for creating webhook parsers."""

    _parsers: dict[GitProvider, type[WebhookParser]] = {
        GitProvider.GITHUB: GitHubWebhookParser,
        GitProvider.GITLAB: GitLabWebhookParser,
        GitProvider.GITEA: GiteaWebhookParser,
        GitProvider.GITEE: GiteeWebhookParser,
        GitProvider.GOGS: GogsWebhookParser,
        GitProvider.BITBUCKET: BitbucketWebhookParser,
        GitProvider.BITBUCKET_SERVER: BitbucketServerWebhookParser,
        GitProvider.AZURE_DEVOPS: AzureDevOpsWebhookParser,
        GitProvider.DOCKERHUB: DockerHubWebhookParser,
    }

    @classmethod
    def parser_class(cls, provider: GitProvider) -> type[WebhookParser]:
        parser_class = cls._parsers.get(GitProvider(provider))
        if not parser_class:
            raise ValueError(f"Unsupported provider: {provider}")
        return parser_class

    @classmethod
    def create(cls, provider: GitProvider, *options: Option) -> WebhookParser:
        """Create a parser for the given provider."""
        return cls.parser_class(provider)(*options)
