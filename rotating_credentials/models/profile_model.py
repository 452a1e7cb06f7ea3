from pydantic import BaseModel, ConfigDict, Field


class RawProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_key_id: str = Field("", alias="aws_access_key_id")
    secret_access_key: str = Field("", alias="aws_secret_access_key")
    session_token: str = Field("", alias="aws_session_token")
    region: str = ""
    output: str = ""


class CredentialsFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    default: RawProfile = Field(default_factory=RawProfile)
