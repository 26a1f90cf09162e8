from fastapi import Depends, FastAPI, Form, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel
import uvicorn
import logging
from command import CommandFactory, CommandContext, CommandParser, CommandResponse, ContributionStore
from command.factory import register_builtin_commands
from db import ContributionDB, get_contribution_db
from utils.config import Config, get_config
from utils.errors import (
    ChatDeliveryError,
    ContributionNotFoundError,
    InvalidRollbackIdError,
    MissingConfigError,
    UnknownCommandError
)
from utils.slack import SlackClient, notify_contributor, notify_management
from utils.types import Contribution, Size, Status

logging.basicConfig(level=get_config().get("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

# Slack only renders ephemeral text from 2xx responses
NOT_FOUND_TEXT = "I could not find a contribution with that rollback id. Use `list` to see your rollback ids."
FAILURE_TEXT = "Sorry, something went wrong. Please try again later."

app = FastAPI()

# Register built-in commands
register_builtin_commands()


def get_store() -> ContributionDB:
    return get_contribution_db(get_config().get("DB_PATH", None))


def get_slack_client(config: Config = Depends(get_config)) -> SlackClient:
    return SlackClient(config)


# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    """Initialize database on application startup."""
    await get_store().init()


class SubmissionRequest(BaseModel):
    username: str
    private_channel: str
    size: Size
    text: str
    status: Status = Status.INITIAL


class ReviewRequest(BaseModel):
    status: Status


def to_http_response(response: CommandResponse) -> Response:
    """Relay a command response to the chat platform."""
    media_type = "application/json" if response.is_json else "text/plain"
    return Response(content=response.body, status_code=response.status_code, media_type=media_type)


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.post("/slack/commands")
async def slash_command(
    user_id: str = Form(...),
    text: str = Form(""),
    config: Config = Depends(get_config),
    store: ContributionDB = Depends(get_store)
):
    """Slack slash command callback."""
    response = await handle_command(user_id, text, config, store)
    return to_http_response(response)


async def handle_command(user_id: str, text: str, config: Config, store: ContributionStore) -> CommandResponse:
    """Parse and execute a command."""
    command_name, args = CommandParser.parse(text)

    try:
        command = CommandFactory.create(command_name)
    except UnknownCommandError as e:
        return CommandResponse.ephemeral(f"{e}. Use help for available commands.")

    is_valid, error_msg = command.validate(args)
    if not is_valid:
        return CommandResponse.ephemeral(f"Invalid arguments: {error_msg}")

    context = CommandContext(user_id=user_id, config=config, store=store)

    try:
        return await command.execute(context, args)
    except InvalidRollbackIdError as e:
        logger.info(f"Rejected rollback id from {user_id}: {e}")
        return CommandResponse.ephemeral(f"Invalid arguments: {e.reason}. Usage: {command.usage}")
    except ContributionNotFoundError as e:
        logger.error(f"Command '{command_name}' failed for {user_id}: {e}")
        return CommandResponse.ephemeral(NOT_FOUND_TEXT)
    except Exception as e:
        logger.error(f"Command '{command_name}' failed for {user_id}: {e}")
        return CommandResponse.ephemeral(FAILURE_TEXT)


@app.post("/contributions")
async def submit_contribution(
    submission: SubmissionRequest,
    config: Config = Depends(get_config),
    store: ContributionDB = Depends(get_store),
    slack: SlackClient = Depends(get_slack_client)
):
    """Store a contribution submitted through a private message and announce it."""
    try:
        contribution = await store.save_contribution(
            username=submission.username,
            private_channel=submission.private_channel,
            size=submission.size,
            text=submission.text,
            status=submission.status
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    channel = config.get("MANAGEMENT_CHANNEL", None)
    if channel is None:
        logger.warning(f"MANAGEMENT_CHANNEL not configured, not announcing {contribution.rollback_id}")
    else:
        try:
            await notify_management(slack, contribution, channel)
        except (ChatDeliveryError, MissingConfigError) as e:
            logger.error(f"Failed to announce {contribution.rollback_id} in {channel}: {e}")

    return Response(content=contribution.to_json(), media_type="application/json")


@app.post("/contributions/{contribution_id}/review")
async def review_contribution(
    contribution_id: str,
    review: ReviewRequest,
    store: ContributionDB = Depends(get_store),
    slack: SlackClient = Depends(get_slack_client)
):
    """Record a review decision and notify the contributor."""
    try:
        contribution: Contribution = await store.update_status(contribution_id, review.status)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ContributionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    notified = True
    try:
        await notify_contributor(slack, contribution)
    except (ChatDeliveryError, MissingConfigError) as e:
        logger.error(f"Failed to notify {contribution.username} about {contribution.rollback_id}: {e}")
        notified = False

    payload = contribution.model_dump(mode="json", by_alias=True)
    payload["notified"] = notified
    return payload


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
