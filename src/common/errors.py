"""Error types shared across pipeline stages."""


class NewsPipelineError(Exception):
    """Base class for failures that abort a pipeline run."""


class UpstreamFetchError(NewsPipelineError):
    """A news source call failed or returned an unexpected shape."""


class PersistenceError(NewsPipelineError):
    """The batched write to the news store failed."""


class ConfigurationError(NewsPipelineError):
    """A required credential or identifier is missing."""


class PublishError(NewsPipelineError):
    """Posting to the social network failed after all retries."""
