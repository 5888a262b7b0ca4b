"""Constants used throughout container-selector."""


# Command resolution
DEFAULT_COMMAND = "bash"
COMMAND_PROMPT = f"Enter command to run inside container [default: {DEFAULT_COMMAND}]: "

# Selection
PICKER_PROMPT = "Select a container:"

# Exec planning
DOCKER_BINARY = "docker"
INTERACTIVE_SHELLS = frozenset({"bash", "sh", "zsh"})
SHELL_METACHARACTERS = "|&;<>()$`\\\"'"
WRAPPER_SHELL = "sh"
TTY_FLAG = "-it"
STDIN_FLAG = "-i"

# Docker short id length, used when a container reports no name
SHORT_ID_LENGTH = 12
