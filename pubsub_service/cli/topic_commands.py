# pubsub_service/cli/topic_commands.py
import logging

import click
from flask import current_app
from flask.cli import AppGroup

from pubsub_service.exceptions import PubSubServiceError
from pubsub_service.services.pubsub import PubSubClientService, new_email_topic

topic_cli = AppGroup("topic")
logger = logging.getLogger(__name__)


@topic_cli.command("check")
@click.argument("topic_id", required=False)
@click.option("--timeout", type=float, default=None, help="Seconds to wait for the lookup.")
def check_topic(topic_id, timeout):
    """Verify that TOPIC_ID exists (defaults to the email topic)."""
    config = current_app.extensions["pubsub_service"]["config"]
    topic_id = topic_id or config.EMAIL_TOPIC_ID

    service = PubSubClientService(config.pubsub_params())
    try:
        service.initialize()
    except Exception as e:
        raise click.ClickException(f"Failed to connect to PubSub: {e}")

    try:
        email_topic = new_email_topic(service.client, topic_id, timeout=timeout)
    except PubSubServiceError as e:
        _close_after_error(service)
        raise click.ClickException(f"{e}: {topic_id}")
    except Exception as e:
        _close_after_error(service)
        raise click.ClickException(f"Failed to check topic existence: {e}")

    try:
        service.cleanup()
    except Exception as e:
        raise click.ClickException(f"Failed to close PubSub connection: {e}")

    logger.info(f"🔍 Topic {topic_id} verified")
    click.echo(f"✅ Topic exists: {email_topic.publisher.topic.path}")


def _close_after_error(service: PubSubClientService) -> None:
    """Close the client without masking the error already being reported"""
    try:
        service.cleanup()
    except Exception as e:
        logger.warning(f"Failed to close PubSub connection: {e}")
