"""Well-known Cargo names and locations."""

CRATES_IO_INDEX = "https://github.com/rust-lang/crates.io-index"
CRATES_IO_REGISTRY = "crates-io"

CARGO_HOME_ENV_VAR = "CARGO_HOME"
DEBUG_ENV_VAR = "CARGO_INDEX_DEBUG"

CARGO_DIR_NAME = ".cargo"
# Cargo reads the extensionless name first and falls back to the .toml spelling
CONFIG_FILE_NAMES = ("config", "config.toml")
