from .command_executor import run_shell_command, CompilerDiagnostic
from .file_probe import file_exists, all_files_exist, find_first_dir_index
