from pydantic import BaseModel, ConfigDict


class TweetkitModel(BaseModel):
    """Base for all decoded response models.

    Unknown keys are ignored so new server-side attributes don't break
    decoding; instances are frozen once built.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
