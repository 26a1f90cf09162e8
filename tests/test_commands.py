"""
Unit tests for the help, list and rollback commands.
"""
import json
import pytest

from command.base import CommandContext, CommandResponse
from command.commands.help import HelpCommand
from command.commands.listing import ListCommand, contribution_attachment, status_color
from command.commands.rollback import RollbackCommand
from utils.config import Config
from utils.errors import ContributionNotFoundError, ContributionStoreError, InvalidRollbackIdError
from utils.types import Status
from tests.conftest import FakeStore, make_contribution


class BrokenConfig:
    def get(self, key, default=None):
        raise RuntimeError("config backend unavailable")


class TestHelpCommand:

    @pytest.mark.asyncio
    async def test_includes_deployment_info(self, config):
        context = CommandContext(user_id="U123", config=config, store=FakeStore())
        response = await HelpCommand().execute(context, [])

        assert response.status_code == 200
        assert "_Deployment_: 1.2.3 test" in response.body
        assert "`help` shows this help" in response.body
        assert "`list` lists your submitted contributions" in response.body
        assert "`rollback ROLLBACK_ID`" in response.body

    @pytest.mark.asyncio
    async def test_missing_config_still_answers(self):
        context = CommandContext(user_id="U123", config=Config({}), store=FakeStore())
        response = await HelpCommand().execute(context, [])

        assert response.status_code == 200
        assert response.body.endswith("_Deployment_:  ")

    @pytest.mark.asyncio
    async def test_failing_config_still_answers(self):
        context = CommandContext(user_id="U123", config=BrokenConfig(), store=FakeStore())
        response = await HelpCommand().execute(context, [])

        assert response.status_code == 200
        assert "*Hi there!*" in response.body

    def test_rejects_arguments(self):
        is_valid, _ = HelpCommand().validate(["extra"])
        assert not is_valid


class TestListCommand:

    @pytest.mark.asyncio
    async def test_empty_listing(self, config):
        store = FakeStore()
        context = CommandContext(user_id="U123", config=config, store=store)
        response = await ListCommand().execute(context, [])

        assert response.status_code == 200
        assert "do not have any contributions" in response.body
        assert "attachments" not in response.body
        assert store.requested_users == ["U123"]

    @pytest.mark.asyncio
    async def test_colors_follow_status_in_order(self, config, fake_store):
        context = CommandContext(user_id="U123", config=config, store=fake_store)
        response = await ListCommand().execute(context, [])

        body = json.loads(response.body)
        assert response.status_code == 200
        assert body["text"] == "Here is the listing of your open source contribution submissions"
        assert [a["color"] for a in body["attachments"]] == ["#ffff00", "#ff0000"]

    @pytest.mark.asyncio
    async def test_attachment_fields(self, config, fake_store):
        context = CommandContext(user_id="U123", config=config, store=fake_store)
        response = await ListCommand().execute(context, [])

        first = json.loads(response.body)["attachments"][0]
        assert first["fallback"] == "fallback"
        assert first["text"] == "Fixed a typo in the README"
        assert first["fields"] == [
            {"title": "Size", "value": "SMALL", "short": True},
            {"title": "Status", "value": "PENDING", "short": True},
            {"title": "Rollback ID", "value": "aaa-1", "short": True},
        ]

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, config):
        store = FakeStore(error=ContributionStoreError("boom"))
        context = CommandContext(user_id="U123", config=config, store=store)

        with pytest.raises(ContributionStoreError):
            await ListCommand().execute(context, [])

    def test_initial_status_has_no_color(self):
        attachment = contribution_attachment(make_contribution(status="INITIAL"))
        assert "color" not in attachment
        assert status_color(Status.INITIAL) is None

    def test_accepted_is_green(self):
        assert status_color(Status.ACCEPTED) == "#36a64f"


class TestRollbackCommand:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rollback_id", ["", None])
    async def test_missing_id(self, config, rollback_id):
        store = FakeStore()
        context = CommandContext(user_id="U123", config=config, store=store)
        response = await RollbackCommand().rollback(context, rollback_id)

        assert response.status_code == 200
        assert json.loads(response.body) == {
            "response_type": "ephemeral",
            "text": "Pass rollback id to delete entry",
        }
        assert store.deleted == []

    @pytest.mark.asyncio
    async def test_execute_without_args(self, config):
        store = FakeStore()
        context = CommandContext(user_id="U123", config=config, store=store)
        response = await RollbackCommand().execute(context, [])

        assert json.loads(response.body)["text"] == "Pass rollback id to delete entry"
        assert store.deleted == []

    @pytest.mark.asyncio
    async def test_deletes_entry(self, config):
        store = FakeStore([make_contribution(id="abc123", sequence="1")])
        context = CommandContext(user_id="U123", config=config, store=store)
        response = await RollbackCommand().execute(context, ["abc123-1"])

        body = json.loads(response.body)
        assert store.deleted == [("abc123", "1")]
        assert store.contributions == []
        assert response.status_code == 200
        assert body["response_type"] == "ephemeral"
        assert "abc123-1" in body["text"]

    @pytest.mark.asyncio
    async def test_extra_hyphens_stay_in_sequence(self, config):
        store = FakeStore()
        context = CommandContext(user_id="U123", config=config, store=store)

        with pytest.raises(ContributionNotFoundError):
            await RollbackCommand().execute(context, ["abc-1-2"])
        assert store.deleted == [("abc", "1-2")]

    @pytest.mark.asyncio
    async def test_unknown_entry_propagates(self, config):
        context = CommandContext(user_id="U123", config=config, store=FakeStore())

        with pytest.raises(ContributionNotFoundError):
            await RollbackCommand().execute(context, ["nope-1"])

    @pytest.mark.asyncio
    async def test_undecodable_id(self, config):
        store = FakeStore()
        context = CommandContext(user_id="U123", config=config, store=store)

        with pytest.raises(InvalidRollbackIdError):
            await RollbackCommand().execute(context, ["abc123"])
        assert store.deleted == []

    def test_rejects_multiple_ids(self):
        is_valid, error = RollbackCommand().validate(["a-1", "b-2"])
        assert not is_valid
        assert "rollback ROLLBACK_ID" in error


def test_response_payload_shape():
    response = CommandResponse.ephemeral("hi")
    assert response.to_payload() == {
        "statusCode": 200,
        "body": '{"response_type": "ephemeral", "text": "hi"}',
    }
    assert response.is_json
    assert not CommandResponse(status_code=200, body="plain").is_json
