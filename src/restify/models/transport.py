from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ProxyInfo(BaseModel):
    """An HTTP proxy, optionally with basic credentials."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def auth(self) -> Optional[tuple[str, str]]:
        if self.username is None or self.password is None:
            return None
        return (self.username, self.password)


class ClientCertificate(BaseModel):
    """PEM encoded certificate, with an optional PEM encoded private key.

    Without a key, the certificate is trusted as a server certificate.
    With a key, it is presented to the server as the client certificate.
    """

    model_config = ConfigDict(frozen=True)

    certificate: str
    key: Optional[str] = None


class FileUpload(BaseModel):
    """A file sent as one part of a multipart request."""

    model_config = ConfigDict(frozen=True)

    name: str
    file: Path
    file_name: Optional[str] = None
    content_type: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def default_file_name(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("file_name") is None
            and data.get("file") is not None
        ):
            data = {**data, "file_name": Path(data["file"]).name}
        return data
