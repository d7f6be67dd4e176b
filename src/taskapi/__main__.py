import logging

import click

from dotenv import load_dotenv

from taskapi.server import TaskServer


load_dotenv()

logger = logging.getLogger(__name__)


@click.command()
@click.option('--host', 'host', default='localhost', envvar='TASKAPI_HOST')
@click.option('--port', 'port', default=3000, envvar='TASKAPI_PORT')
@click.option(
    '--log-level',
    'log_level',
    default='INFO',
    envvar='TASKAPI_LOG_LEVEL',
    type=click.Choice(
        ['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False
    ),
)
@click.option(
    '--no-seed',
    'no_seed',
    is_flag=True,
    default=False,
    help='Start with an empty task list.',
)
def main(host: str, port: int, log_level: str, no_seed: bool):
    """Serves the task API."""
    logging.basicConfig(level=log_level.upper())
    logger.info('Serving tasks on http://%s:%s/api/tasks', host, port)
    TaskServer(seed=not no_seed).start(
        host=host, port=port, log_level=log_level.lower()
    )


if __name__ == '__main__':
    main()
