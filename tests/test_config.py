import pytest

from agentpro.clients.local_notification_client import LocalNotificationClient
from agentpro.clients.webhook_notification_client import WebhookNotificationClient
from agentpro.config import Settings
from agentpro.container import AppContainer


class TestSettings:
    """Unit tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "ENV",
            "COMMIT_HASH",
            "LOGIN_DELAY_SECONDS",
            "READ_RECEIPT_DELAY_SECONDS",
            "NOTIFICATION_BACKEND",
            "PLAYER_CACHE_TTL_SECONDS",
            "SEED_DATA",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.login_delay_seconds == 0.5
        assert settings.register_delay_seconds == 0.3
        assert settings.read_receipt_delay_seconds == 0.4
        assert settings.notification_delay_seconds == 1.0
        assert settings.player_cache_ttl_seconds == 300.0
        assert settings.notification_backend == "local"
        assert settings.seed_data is True
        assert settings.is_prod is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGIN_DELAY_SECONDS", "0")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SEED_DATA", "False")
        monkeypatch.setenv("NOTIFICATION_BACKEND", "webhook")
        monkeypatch.setenv("NOTIFICATION_WEBHOOK_URL", "http://dispatcher/notify")

        settings = Settings.from_env()

        assert settings.login_delay_seconds == 0
        assert settings.log_level == "DEBUG"
        assert settings.seed_data is False
        assert settings.notification_webhook_url == "http://dispatcher/notify"

    def test_prod_requires_commit_hash(self) -> None:
        with pytest.raises(ValueError, match="COMMIT_HASH"):
            Settings(env="prod")

        assert Settings(env="prod", commit_hash="abc123").is_prod

    def test_invalid_backend(self) -> None:
        with pytest.raises(ValueError, match="NOTIFICATION_BACKEND"):
            Settings(notification_backend="push")

    def test_webhook_requires_url(self) -> None:
        with pytest.raises(ValueError, match="NOTIFICATION_WEBHOOK_URL"):
            Settings(notification_backend="webhook")

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            Settings(read_receipt_delay_seconds=-1)


class TestAppContainer:
    """Unit tests for service wiring."""

    def test_seeded_container(self) -> None:
        container = AppContainer(Settings())

        assert len(container.roster.list_players()) == 2
        assert len(container.messaging_store.list_chats()) == 1
        assert "agent@test.com" in container.credentials

    def test_unseeded_container(self) -> None:
        container = AppContainer(Settings(seed_data=False))

        assert container.roster.list_players() == []
        assert container.messaging_store.list_chats() == []

    def test_notification_backend_selection(self) -> None:
        local = AppContainer(Settings(seed_data=False))
        webhook = AppContainer(
            Settings(
                seed_data=False,
                notification_backend="webhook",
                notification_webhook_url="http://dispatcher/notify",
            )
        )

        assert isinstance(local.notifications.client, LocalNotificationClient)
        assert isinstance(webhook.notifications.client, WebhookNotificationClient)
        assert webhook.notifications.client.url == "http://dispatcher/notify"

    def test_delays_are_wired(self) -> None:
        container = AppContainer(
            Settings(read_receipt_delay_seconds=0.1, notification_delay_seconds=2)
        )

        assert container.read_receipts.delay == 0.1
        assert container.notifications.delay_seconds == 2
