"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from hardcoded_strings_linter.infrastructure.adapters.pylint_adapter import PylintAdapter
from hardcoded_strings_linter.infrastructure.di.container import HardcodedStringsContainer
from hardcoded_strings_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = HardcodedStringsContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        guidance_service=container.get_guidance_service(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
        fixer_gateway=container.get_fixer_gateway(),
        asset_rule=container.get_hardcoded_asset_rule(),
        pylint_adapter=PylintAdapter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
