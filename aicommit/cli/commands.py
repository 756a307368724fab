"""CLI Commands"""

import os
import sys

from aicommit.config import PROVIDERS, MODEL_ENV_VAR, ConfigError, load_config
from aicommit.output import bold, dim, info, print_error


def display_config() -> int:
    """Display the provider and model the environment selects."""
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        return 1

    print(f"\n{bold('Current Configuration')}\n")
    print(f"    provider:  {info(config.provider)}")
    print(f"    model:     {info(config.model)}{dim(f' (from {MODEL_ENV_VAR})') if config.model_overridden else ''}")
    print(f"    endpoint:  {info(config.base_url or 'OpenAI default')}")
    print(f"    api key:   {info(config.masked_key)}")

    print(f"\n  {dim('Key lookup order:')}")
    for provider in PROVIDERS:
        print(f"    {provider.key_var:<16} {dim(f'default model {provider.default_model}')}")
    print()
    return 0


def run_install_completion() -> int:
    """Print shell tab completion setup."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete ai-commit)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim(f'source {rc_file}')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell ai-commit | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish ai-commit | source")

    print(f"\n{dim('After setup, press TAB to autocomplete commands and flags.')}")
    return 0
