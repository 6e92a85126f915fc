from secrets_api_client.cli.bootstrap import cli_factory
from secrets_api_client.cli.controllers.config import ConfigController
from secrets_api_client.cli.controllers.projects import ProjectController
from secrets_api_client.cli.main import main, setup

cli = cli_factory(
    main=main,
    commands=[setup],
    controller_types=[
        ProjectController,
        ConfigController,
    ],
)

if __name__ == "__main__":
    cli()
