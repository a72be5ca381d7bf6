from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import yaml

class PathsConfig(BaseSettings):
    input_dir: Path = Field(default=Path("input_data/snapshots"))
    output_dir: Path = Field(default=Path("output_data/plain"))
    log_dir: Path = Field(default=Path("logs"))

    model_config = SettingsConfigDict(arbitrary_types_allowed=True)

class ProcessingConfig(BaseSettings):
    snapshot_pattern: str = Field(default="*.pickle")
    max_workers: int = Field(default=4)

class FilesConfig(BaseSettings):
    plain_data_yaml: str = Field(default="plain_data.yaml")
    plain_data_json: str = Field(default="plain_data.json")
    plain_data_pickle: str = Field(default="plain_data.pickle")

class LoggingConfig(BaseSettings):
    processor_log: str = Field(default="processor.log")
    unwrap_log: str = Field(default="unwrap.log")
    transfer_log: str = Field(default="transfer.log")
    reactivity_log: str = Field(default="reactivity.log")
    console_level: str = Field(default="INFO")

class Config(BaseSettings):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        arbitrary_types_allowed=True
    )

    @classmethod
    def load_from_yaml(cls, yaml_path: Path) -> "Config":
        with yaml_path.open("r") as f:
            yaml_data = yaml.safe_load(f) or {}
        return cls(**yaml_data)

# Create a global config instance
config = Config.load_from_yaml(Path(__file__).parent / "config.yml")
