from enum import Enum


class UserField(str, Enum):
    created_at = "created_at"
    description = "description"
    entities = "entities"
    id = "id"
    location = "location"
    name = "name"
    pinned_tweet_id = "pinned_tweet_id"
    profile_image_url = "profile_image_url"
    protected = "protected"
    public_metrics = "public_metrics"
    url = "url"
    username = "username"
    verified = "verified"
    withheld = "withheld"


class TweetField(str, Enum):
    attachments = "attachments"
    author_id = "author_id"
    context_annotations = "context_annotations"
    conversation_id = "conversation_id"
    created_at = "created_at"
    entities = "entities"
    geo = "geo"
    id = "id"
    in_reply_to_user_id = "in_reply_to_user_id"
    lang = "lang"
    non_public_metrics = "non_public_metrics"
    organic_metrics = "organic_metrics"
    possibly_sensitive = "possibly_sensitive"
    promoted_metrics = "promoted_metrics"
    public_metrics = "public_metrics"
    referenced_tweets = "referenced_tweets"
    reply_settings = "reply_settings"
    source = "source"
    text = "text"
    withheld = "withheld"


class UserExpansion(str, Enum):
    pinned_tweet_id = "pinned_tweet_id"
