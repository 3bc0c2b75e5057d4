"""CLI entry point for azfootprint.

Running the command with no arguments starts the interactive drill-down:

    $ azfootprint
    Available Subscriptions:
    [0] Prod (00000000-0000-0000-0000-000000000001)
    Select a subscription by number: 0
    ...

    VM Information:
    Name: vm-x
    Location: eastus
    Size: Standard_D2s_v3

Every error ends the run with a single "Error: ..." line on stderr and exit
code 1.
"""

import logging
import sys
from typing import NoReturn

import click

from azfootprint import __version__
from azfootprint.auth_models import AuthMethod
from azfootprint.config_manager import ConfigError, ConfigManager
from azfootprint.credential_factory import CredentialFactory, CredentialFactoryError
from azfootprint.drill_down import DrillDownError, DrillDownSelector
from azfootprint.modules.interaction_handler import CLIInteractionHandler
from azfootprint.resource_browser import ResourceBrowser, ResourceBrowserError

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger().setLevel(level)

    # Azure SDK is chatty at INFO (token acquisition, HTTP policies)
    logging.getLogger("azure").setLevel(logging.NOTSET if verbose else logging.WARNING)


def _fail(error: Exception, context: str | None = None) -> NoReturn:
    logger.debug("Error details:", exc_info=error)
    message = f"{context}: {error}" if context else str(error)
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    help="Config file path (default: ~/.azfootprint/config.toml)",
)
@click.option(
    "--auth-method",
    type=click.Choice([m.value for m in AuthMethod], case_sensitive=False),
    help="Credential source (overrides config)",
)
@click.version_option(version=__version__, prog_name="azfootprint")
def main(verbose: bool, config: str | None, auth_method: str | None) -> None:
    """Interactively pick an Azure VM and show its details.

    Lists subscriptions, then resource groups in the chosen subscription,
    then VMs in the chosen resource group, and prints the name, location
    and size of the chosen VM.

    \b
    AUTHENTICATION:
        Uses ambient discovery by default (environment variables,
        managed identity, Azure CLI login). Run 'az login' first
        when working locally.

    \b
    CONFIGURATION:
        Config file: ~/.azfootprint/config.toml
        Keys: auth_method, tenant_id, client_id
    """
    _setup_logging(verbose)

    try:
        azfootprint_config = ConfigManager.load_config(config)
        auth_config = azfootprint_config.to_auth_config(auth_method)
    except ConfigError as e:
        _fail(e, "Invalid configuration")

    try:
        credential = CredentialFactory.create_credential(auth_config)
    except CredentialFactoryError as e:
        _fail(e, "Failed to create credential")

    browser = ResourceBrowser(credential)
    selector = DrillDownSelector(browser, CLIInteractionHandler())

    try:
        selector.run()
    except (ResourceBrowserError, DrillDownError) as e:
        _fail(e)
    finally:
        browser.close()
        credential.close()


if __name__ == "__main__":
    main()
