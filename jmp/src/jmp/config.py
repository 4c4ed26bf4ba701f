from __future__ import annotations

# /* ~~~ the whole table is read at once; anything bigger fails closed ~~~ */
MAX_TABLE_BYTES: int = 1 << 20

# file names under the known folders
TABLE_NAME: str = "jumptable"
HOME_TABLE_NAME: str = ".jumptable"

# environment
TABLE_ENV: str = "JMP_TABLE"        # same as --jumptable
SHELL_ENV: str = "SHELL"
DEPTH_ENV: str = "JUMP_DEPTH"
DEPTH_WRAP: int = 256               # depth counter is a single byte

# lock the table for the whole read-modify-write window
LOCK_TABLE: bool = True

# /* ~~~ process exit codes ~~~ */
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NO_PATTERN = 2
EXIT_EMPTY_TABLE = 4
EXIT_NO_LOCATION = 50
EXIT_NO_SHELL = 51
EXIT_PATH_RESOLUTION = 100
EXIT_TABLE_ACCESS = 101
EXIT_TABLE_READ = 102
EXIT_TABLE_ADD = 103
EXIT_TABLE_SEEK = 104
EXIT_TABLE_TRUNCATE = 105
EXIT_TABLE_REWRITE = 106
EXIT_CHDIR = 108
EXIT_EXEC = 109
EXIT_OOM = 255

# web preview
WEB_HOST: str = "127.0.0.1"
WEB_PORT: int = 5000
