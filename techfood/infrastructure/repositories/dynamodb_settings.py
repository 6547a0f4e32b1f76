"""DynamoDBクライアント設定."""
import os

from botocore.config import Config

DEFAULT_CONNECT_TIMEOUT = 3
DEFAULT_READ_TIMEOUT = 5
DEFAULT_MAX_ATTEMPTS = 2


def dynamodb_client_config() -> Config:
    """タイムアウトと再試行回数を制限したboto3クライアント設定を返す.

    タイムアウトは呼び出しの失敗として上位に伝わる。
    """
    return Config(
        connect_timeout=float(os.environ.get("DYNAMODB_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)),
        read_timeout=float(os.environ.get("DYNAMODB_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)),
        retries={"max_attempts": DEFAULT_MAX_ATTEMPTS},
    )
