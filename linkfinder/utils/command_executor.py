import subprocess
from ..cli_logger import logger
from ..errors import CompilerInvocationError

def run_shell_command(command, env=None, input_data=None, cwd=None, merge_stderr=False):
    """
    Executes a command and captures its output.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): A dictionary of environment variables.
        input_data (str, optional): Data to be passed to the command's stdin.
        cwd (str, optional): The working directory for the command.
        merge_stderr (bool): If True, stderr is folded into stdout, the way
            ``2>&1`` would in a shell.

    Returns:
        A tuple (stdout, stderr, return_code). On launch failure stdout is
        empty, stderr holds the reason and return_code is None; a
        negative return_code is a signal and means the command did run.
    """
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            text=True,
            env=env,
            input=input_data,
            check=False,
            cwd=cwd
        )
        return result.stdout, result.stderr or "", result.returncode

    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        return "", str(e), None
    except OSError as e:
        logger.error(f"Unable to run {command[0]}: {e}")
        return "", str(e), None


class CompilerDiagnostic:
    """
    Runs the compiler with diagnostic flags and hands back its combined output.

    This is the only way discovery code talks to a compiler binary, so tests
    can swap it for an in-memory fake with the same ``run`` signature.
    """

    def __init__(self, env=None, cwd=None):
        self.env = env
        self.cwd = cwd

    def run(self, args, stdin_path=None):
        input_data = None
        if stdin_path is not None:
            with open(stdin_path, "r") as f:
                input_data = f.read()

        logger.debug(f"Running compiler diagnostic: {' '.join(args)}")
        stdout, stderr, return_code = run_shell_command(
            list(args), env=self.env, input_data=input_data, cwd=self.cwd, merge_stderr=True
        )
        if return_code is None:
            raise CompilerInvocationError(args, stderr)
        if return_code != 0:
            logger.debug(f"'{args[0]}' exited with code {return_code}")
        return stdout
