# sponsorblock

A synchronous client for the SponsorBlock API. It looks up skippable segments
for videos, such as sponsors, intros, outros and highlights. It can also fetch
segment details, user info, user statistics and the API server status.

## Installation

```
pip install sponsorblock
```

## Fetching segments

```python
from sponsorblock.categories import AcceptedActions, AcceptedCategories
from sponsorblock.client import Client

# This should be random. Treat it like a password and keep it across sessions.
USER_ID = "your local user id"

with Client(USER_ID) as client:
    segments = client.fetch_segments(
        "9Yhc6mmdJC4",
        AcceptedCategories.ALL,
        AcceptedActions.ALL,
    )

for segment in segments:
    print(segment.category, segment.action.kind, segment.action.start, segment.votes)
```

`AcceptedCategories` and `AcceptedActions` are flag enums, so you can combine
members with `|`, for example
`AcceptedCategories.SPONSOR | AcceptedCategories.ENDCARDS_CREDITS`. Both default
to `ALL`. You can pass `required_segments`, a list of segment UUIDs, to have
those returned even when they fall below the vote threshold.

Each `Segment` has a `category` (a `Category`), an `action` (an `Action`), a
`uuid`, `locked`, `votes` and `video_duration_on_submission`. The last one is
`None` for old segments. An `Action` has a `kind` (an `ActionKind`). Skip and
mute actions also carry `start` and `end`. A point of interest carries only
`start`, and a full-video label carries neither. Highlight segments are always
reported as points of interest.

Lookups are private by default. Only the first few characters of the SHA-256
hash of the video ID are sent, and the server's reply is matched against the
full video ID. You set how many characters are sent with `hash_prefix_length`,
which must be between 4 and 32. To send the plain video ID instead, pass
`private_searches=False`.

Segment listings do not include additional details. To fill them in, call
`segment.fetch_additional_info(client)`. It returns whether a request was made.
You can also call `client.fetch_segment_info(uuid)` or
`client.fetch_segment_info_multiple(uuids)`, which return segments whose
`additional_info` is an `AdditionalSegmentInfo`.

## Other requests

```python
with Client(USER_ID) as client:
    status = client.fetch_api_status()
    print(status.uptime, status.db_version, status.load_average)

    info = client.fetch_user_info_public("some public user id")
    print(info.total_segment_count(), info.total_view_count())

    stats = client.fetch_user_stats_local(USER_ID)
    print(stats.overall_stats.segment_count, stats.category_count)
```

`fetch_user_info_local` and `fetch_user_stats_public` are also available. When
a user has no name, the API returns the user ID in its place. In that case
`user_name` is `None`. In user statistics, counts for categories or action
types that this package does not recognise are dropped.

## Configuration

`Client(user_id, ...)` takes these keyword arguments:

- `base_url`: the API base. It defaults to `Client.BASE_URL_MAIN`, and
  `Client.BASE_URL_TESTING` selects the testing database. A trailing `/` is
  removed.
- `hash_prefix_length`: the number of hash characters sent for private
  lookups. The default is 4. Any value outside 4 to 32 raises `ValueError`.
- `service`: the video service. The default is `"YouTube"`.
- `timeout`: the request timeout, in seconds or as a `timedelta`. The default
  is 5 seconds. `None` means no timeout, and a value that is not positive
  raises `ValueError`.
- `private_searches`: whether videos are looked up by hash prefix. The default
  is `True`.
- `transport`: an optional `httpx` transport, which is useful for testing.

Use the client as a context manager, or call `close()` when you are done.

## Errors

Every failure raises a subclass of `sponsorblock.errors.SponsorBlockError`:

- `HttpApiError`: the server returned a 5xx status.
- `HttpClientError`: the server returned a 4xx status. A 404 means nothing was
  found.
- `HttpUnknownError`: the server returned some other non-success status.
- `HttpCommunicationError`: a network or protocol failure.
- `NoMatchingVideoHashError`: a private lookup found no entry for the video ID.
- `DeserializationError`: the response could not be decoded. Its subclass
  `UnknownValueError` is raised for an unrecognised category or action type.
- `BadDataError`: the response failed sanity checks, such as a segment that
  starts after it ends.

The HTTP status errors keep the status code in `status`.

## Generating user IDs

`sponsorblock.user_id.gen_user_id()` returns a new random 36-character
alphanumeric local user ID. Generate one per user and store it. Do not create a
new one each time you start.

## What this package does not do

The package only reads from the API. It cannot submit segments or votes, and it
has no VIP-only functions. It has no asynchronous client and no command-line
tool.