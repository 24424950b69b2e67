import os
import yaml
from pydantic import BaseModel
from typing import Any, Literal, Optional, Type

DEFAULT_BASE_URL = "http://localhost:8082/v1.0"


class IamClientConfig(BaseModel):
    iam_base_url: str = DEFAULT_BASE_URL
    iam_access_token: Optional[str] = None
    iam_domain: Optional[str] = None
    iam_timeout: float = 10.0
    iam_user_agent: Optional[str] = None

    logging_format: Literal["text", "json"] = "text"
    logging_level: str = "INFO"


def filter_value_from_env(CLS: Type[BaseModel]) -> dict[str, Any]:
    config_keys = CLS.model_fields.keys()
    env_already_keys = {}
    for key in config_keys:
        value = os.getenv(key, os.getenv(key.upper(), None))
        if value is None:
            continue
        env_already_keys[key] = value
    return env_already_keys


def filter_value_from_yaml(yaml_string, CLS: Type[BaseModel]) -> dict[str, Any]:
    yaml_config_data: dict | None = yaml.safe_load(yaml_string)
    if yaml_config_data is None:
        return {}

    yaml_already_keys = {}
    config_keys = CLS.model_fields.keys()
    for key in config_keys:
        value = yaml_config_data.get(key, None)
        if value is None:
            continue
        yaml_already_keys[key] = value
    return yaml_already_keys


def get_local_client_config() -> IamClientConfig:
    CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

    if not os.path.isfile(CONFIG_FILE_PATH):
        CONFIG_YAML_STRING = ""
    else:
        with open(CONFIG_FILE_PATH) as f:
            CONFIG_YAML_STRING = f.read()

    _ENV_VARS = filter_value_from_env(IamClientConfig)
    _YAML_VARS = filter_value_from_yaml(CONFIG_YAML_STRING, IamClientConfig)

    VARS = {**_ENV_VARS, **_YAML_VARS}
    return IamClientConfig(**VARS)
