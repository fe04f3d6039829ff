import os
from dataclasses import dataclass
from typing import Mapping, Optional

import boto3
from botocore.exceptions import BotoCoreError

from .errors import SetupError

EXPLICIT, ENVIRONMENT, AMBIENT = "explicit", "environment", "ambient"


@dataclass(frozen=True)
class ResolvedConfig:
    region: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    region_source: str = AMBIENT
    credentials_source: str = AMBIENT


def resolve_config(region=None, access_key_id=None, secret_access_key=None,
                   env: Optional[Mapping[str, str]] = None) -> ResolvedConfig:
    """
    Layered fallback: explicit argument > environment > ambient.
    "Ambient" leaves the value unset so boto3 resolves it itself
    (shared config, instance profile, ...). Static credentials only count
    when both halves come from the same layer.
    """
    env = os.environ if env is None else env

    if region:
        region_source = EXPLICIT
    else:
        region = env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or None
        region_source = ENVIRONMENT if region else AMBIENT

    if access_key_id and secret_access_key:
        creds_source = EXPLICIT
    elif env.get("AWS_ACCESS_KEY_ID") and env.get("AWS_SECRET_ACCESS_KEY"):
        access_key_id, secret_access_key = env["AWS_ACCESS_KEY_ID"], env["AWS_SECRET_ACCESS_KEY"]
        creds_source = ENVIRONMENT
    else:
        access_key_id = secret_access_key = None
        creds_source = AMBIENT

    return ResolvedConfig(region, access_key_id, secret_access_key, region_source, creds_source)


def build_client(config: ResolvedConfig):
    try:
        session = boto3.session.Session(
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
            region_name=config.region,
        )
        return session.client("cloudwatch")
    except (BotoCoreError, ValueError) as e:
        raise SetupError(f"cannot create CloudWatch client: {e}") from e
