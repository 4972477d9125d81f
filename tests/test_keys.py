import hikari
import pytest

from kura import keys


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (keys.channel(4), "ch:4"),
        (keys.channel_voice_states(4), "ch:4:v"),
        (keys.choices(1), "c:1"),
        (keys.join(1), "j:1"),
        (keys.guild(1), "g:1"),
        (keys.guild_channels(1), "g:1:c"),
        (keys.guild_features(1), "g:1:f"),
        (keys.guild_members(1), "g:1:m"),
        (keys.guild_roles(1), "g:1:r"),
        (keys.guild_voice_states(1), "g:1:v"),
        (keys.member(1, 5), "g:1:m:5"),
        (keys.member_roles(1, 5), "g:1:m:5:r"),
        (keys.role(1, 2), "g:1:r:2"),
        (keys.user_voice_state(1, 5), "g:1:v:5"),
        (keys.sharder_to(3), "sharder:to:3"),
    ],
)
def test_key_layout(key: str, expected: str) -> None:
    assert key == expected


def test_keys_accept_snowflakes_and_strings() -> None:
    assert keys.member(hikari.Snowflake(115590097100865541), "4") == "g:115590097100865541:m:4"
