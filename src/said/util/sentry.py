import typing as t

import sentry_sdk

from said.util.config import SaIdSettings


class SentrySettings(SaIdSettings):
    environment: t.Optional[str] = "dev"
    commit_tag: str = "dev"
    sentry_dsn: t.Optional[str] = None


sentry_settings = SentrySettings()


def setup_sentry(component: str, ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> bool:
    """
    Initialize sentry if `APP_SENTRY_DSN` is configured, tagging events with the component that raised them. Returns
    whether sentry was enabled.

    :param component: Name of the entry point (eg the CLI command), sent as the `component` tag.
    :param ignore_exceptions: Exception types which are expected, eg rejected user input, and should not be reported.
    """
    if not sentry_settings.sentry_dsn:
        return False

    def before_send(event: t.Any, hint: t.Any) -> t.Any:
        if "exc_info" in hint:
            _, exc_value, _ = hint["exc_info"]
            if isinstance(exc_value, tuple(ignore_exceptions)):
                return None
        return event

    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.environment,
        release=sentry_settings.commit_tag,
        traces_sample_rate=0,
        # ID numbers are personal information, keep them out of sentry
        send_default_pii=False,
        before_send=before_send,
    )
    sentry_sdk.set_tag("component", component)
    return True
