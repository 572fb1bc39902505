"""CLI handling and top-level execution."""

import os
import subprocess
import sys
from argparse import ArgumentParser

from . import config, utils
from .scope import UmaskScope


class CommandParser(ArgumentParser):
    """Parse the command line arguments."""

    def __init__(self):
        """Create a new parser instance."""
        ArgumentParser.__init__(
            self,
            prog="umaskscope",
            usage="%(prog)s [options] command [args ...]",
            description="Run commands and file operations with a temporary umask.",
        )
        self.add_argument(
            "command",
            metavar="command",
            type=str,
            choices=["show", "exec", "normalize"],
            help="Command to run. Possible commands are: show, exec, normalize",
        )
        self.add_argument(
            "args",
            metavar="args",
            type=str,
            nargs="*",
            help=(
                "The command line to execute (exec) or the paths to normalize (normalize). "
                "Use -- to separate options meant for the executed command."
            ),
        )

        output_group = self.add_argument_group("Output options")
        output_group.add_argument(
            "-v",
            "--verbose",
            dest="verbose",
            action="store_true",
            help="Be verbose (default: false)",
            default=False,
        )
        output_group.add_argument(
            "--debug",
            dest="debug",
            action="store_true",
            help="Enable debug output (default: false)",
            default=False,
        )

        umask_group = self.add_argument_group("Umask options")
        umask_group.add_argument(
            "-m",
            "--umask",
            dest="umask",
            type=str,
            default=None,
            help=(
                "Umask to use while running the command, in octal. "
                "(default: $UMASKSCOPE_UMASK or leave the umask untouched)"
            ),
        )
        umask_group.add_argument(
            "-c",
            "--config",
            dest="config",
            type=str,
            default=None,
            help="Read the umask from a json or yaml config file.",
        )
        umask_group.add_argument(
            "-n",
            "--dry-run",
            dest="dry_run",
            action="store_true",
            help="Show what would be done and exit.",
        )

    def parse_args(self, args=None, namespace=None):
        """Parse the arguments and resolve the umask."""
        options = ArgumentParser.parse_args(self, args, namespace)

        # Command line beats config file beats environment.
        umask = os.environ.get("UMASKSCOPE_UMASK") or None
        if options.config:
            try:
                config_umask = config.read_config(options.config)["umask"]
            except (OSError, KeyError, TypeError) + config.ParseError as e:
                self.error(f"can’t read config file {options.config}: {e}")
            if config_umask is not None:
                umask = config_umask
        if options.umask is not None:
            umask = options.umask
        try:
            options.umask = None if umask is None else utils.parse_umask(umask)
        except (ValueError, TypeError) as e:
            self.error(str(e))

        if options.command == "exec" and not options.args:
            self.error("exec needs a command to run")
        return options


class Runner:
    """Coordinate the execution of commands."""

    def __init__(self, args=None):
        """Create a new runner."""
        self.options = CommandParser().parse_args(args)
        self.commands = {
            "show": self.run_show,
            "exec": self.run_exec,
            "normalize": self.run_normalize,
        }

    def scope(self):
        """Create a new umask scope for the configured umask."""
        o = self.options
        if o.verbose and o.umask is not None:
            print(f"umask: {utils.format_umask(o.umask)}")
        return UmaskScope(o.umask)

    def command(self, cmd):
        """Execute a command."""
        if self.options.verbose:
            print(f"{os.getcwd()} > {cmd}")
        if self.options.debug:
            subprocess.check_call(cmd, env=os.environ, stderr=sys.stderr, stdout=sys.stdout)
        else:
            subprocess.check_call(cmd, env=os.environ)

    def run(self):
        """Execute the selected command."""
        if self.options.debug:
            print(self.options)
        self.commands[self.options.command]()

    def run_show(self):
        """Print the umask that is in effect inside the scope."""
        with self.scope():
            umask = utils.get_umask()
        print("n/a" if umask is None else utils.format_umask(umask))

    def run_exec(self):
        """Run a command with the configured umask."""
        if self.options.dry_run:
            print(f"Executing: {self.options.args}")
            return
        with self.scope():
            self.command(self.options.args)

    def run_normalize(self):
        """Normalize the permissions of all paths according to the configured umask."""
        for path in self.options.args:
            if self.options.verbose or self.options.dry_run:
                print(f"Normalizing: {path}")
            if self.options.dry_run:
                continue
            with self.scope():
                utils.normalize_permissions(path)


def main():
    """Entry point for the CLI."""
    try:
        Runner().run()
    except subprocess.CalledProcessError as e:
        sys.exit(e.returncode)
