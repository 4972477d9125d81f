import datetime

import hikari
import pytest

from kura import errors
from kura import marshalling
from kura import models


class TestCoerceValue:
    def test_decodes_bytes(self) -> None:
        assert marshalling.coerce_value(b"hello") == "hello"

    @pytest.mark.parametrize(("raw", "expected"), [(b"123", 123), ("0", 0), (b"-42", -42)])
    def test_converts_canonical_integers(self, raw: object, expected: int) -> None:
        assert marshalling.coerce_value(raw) == expected

    @pytest.mark.parametrize("raw", [b"0123", b"-0", b"1.5", b"1e3", b" 12", b""])
    def test_leaves_non_canonical_numbers_as_strings(self, raw: bytes) -> None:
        assert marshalling.coerce_value(raw) == raw.decode()

    def test_walks_collections_and_drops_absent_entries(self) -> None:
        assert marshalling.coerce_value([b"1", None, (b"x", b"2")]) == [1, ["x", 2]]

    def test_converts_sets_to_lists(self) -> None:
        assert sorted(marshalling.coerce_value({b"5", b"6"})) == [5, 6]

    def test_invalid_utf8(self) -> None:
        with pytest.raises(errors.InvalidDataFound):
            marshalling.coerce_value(b"\xff\xfe")


class TestPairFields:
    def test_pairs_alternating_entries(self) -> None:
        assert marshalling.pair_fields([b"name", b"ren", "id", b"5"]) == [("name", b"ren"), ("id", b"5")]

    def test_odd_length(self) -> None:
        with pytest.raises(errors.InvalidDataFound):
            marshalling.pair_fields([b"name", b"ren", b"id"])

    def test_invalid_utf8_field_name(self) -> None:
        with pytest.raises(errors.InvalidDataFound):
            marshalling.pair_fields([b"\xff", b"ren"])


class TestBuildRecord:
    def test_from_flat_sequence(self) -> None:
        assert marshalling.build_record([b"name", b"ren", b"id", b"5", b"gone", None]) == {"name": "ren", "id": 5}

    def test_from_mapping(self) -> None:
        assert marshalling.build_record({b"name": b"ren", b"id": b"5"}) == {"name": "ren", "id": 5}


class TestDecodeRecord:
    def test_decodes_with_field_rules(self) -> None:
        role = marshalling.decode_record(
            models.Role, {"guild_id": 1, "id": "2", "name": 404, "color": 255, "permissions": "8"}
        )

        assert role == models.Role(
            guild_id=hikari.Snowflake(1),
            id=hikari.Snowflake(2),
            name="404",
            colour=hikari.Color(255),
            permissions=hikari.Permissions.ADMINISTRATOR,
        )

    def test_missing_required_field(self) -> None:
        with pytest.raises(errors.InvalidDataFound, match="'name'"):
            marshalling.decode_record(models.Role, {"guild_id": 1, "id": 2, "color": 0, "permissions": 0})

    def test_missing_optional_field_uses_default(self) -> None:
        user = marshalling.decode_record(models.User, {"id": 5, "username": "ren"})

        assert user.avatar_hash is None
        assert user.is_bot is False
        assert user.discriminator == "0"

    def test_null_optional_field_uses_default(self) -> None:
        channel = marshalling.decode_record(models.Channel, {"id": "4", "type": 0, "name": "a", "parent_id": None})

        assert channel.category_id is None

    def test_wrong_shape(self) -> None:
        with pytest.raises(errors.InvalidDataFound) as exc_info:
            marshalling.decode_record(
                models.Role, {"guild_id": 1, "id": 2, "name": "a", "color": "red", "permissions": 0}
            )

        assert isinstance(exc_info.value.base_exception, ValueError)

    def test_embedded_record(self) -> None:
        member = marshalling.decode_record(
            models.Member,
            {"guild_id": 1, "user_id": 5, "user.id": 5, "user.username": "ren", "user.bot": 1, "roles": [2, 3]},
        )

        assert member.user == models.User(id=hikari.Snowflake(5), username="ren", is_bot=True)
        assert member.role_ids == {2, 3}

    def test_missing_embedded_record(self) -> None:
        with pytest.raises(errors.InvalidDataFound, match="'user'"):
            marshalling.decode_record(models.Member, {"guild_id": 1, "user_id": 5, "roles": []})

    def test_nested_sequence(self) -> None:
        channel = marshalling.decode_record(
            models.Channel,
            {
                "id": "4",
                "type": 2,
                "name": "voice",
                "permission_overwrites": [{"id": "2", "type": 1, "allow": "1024", "deny": 0}],
            },
        )

        assert channel.permission_overwrites == [
            models.PermissionOverwrite(
                id=hikari.Snowflake(2),
                kind=models.OverwriteKind.MEMBER,
                allow=hikari.Permissions.VIEW_CHANNEL,
                deny=hikari.Permissions.NONE,
            )
        ]


class TestCasts:
    @pytest.mark.parametrize("value", ["abc", "0123", -1, 2**64, True, 1.0, None])
    def test_snowflake_rejects_malformed_identifiers(self, value: object) -> None:
        with pytest.raises(errors.MalformedIdentifier):
            marshalling.snowflake(value)

    def test_snowflake_accepts_strings(self) -> None:
        assert marshalling.snowflake("115590097100865541") == hikari.Snowflake(115590097100865541)

    def test_snowflake_is_an_invalid_data_error(self) -> None:
        assert issubclass(errors.MalformedIdentifier, errors.InvalidDataFound)

    @pytest.mark.parametrize(("value", "expected"), [(1, True), (0, False), ("true", True), ("False", False)])
    def test_boolean(self, value: object, expected: bool) -> None:
        assert marshalling.boolean(value) is expected

    def test_boolean_rejects_other_values(self) -> None:
        with pytest.raises(ValueError):
            marshalling.boolean(2)

    def test_string_accepts_numbers(self) -> None:
        assert marshalling.string(123) == "123"

    def test_string_rejects_bools(self) -> None:
        with pytest.raises(TypeError):
            marshalling.string(True)

    def test_timestamp(self) -> None:
        assert marshalling.timestamp("2021-06-01T12:30:00Z") == datetime.datetime(
            2021, 6, 1, 12, 30, tzinfo=datetime.timezone.utc
        )

    def test_enum(self) -> None:
        assert marshalling.enum(models.ChannelKind)(13) is models.ChannelKind.GUILD_STAGE

    @pytest.mark.parametrize("value", [1, 99, "voice"])
    def test_enum_rejects_values_outside_the_vocabulary(self, value: object) -> None:
        with pytest.raises(errors.InvalidEnumValue):
            marshalling.enum(models.ChannelKind)(value)

    def test_snowflakes_rejects_scalars(self) -> None:
        with pytest.raises(TypeError):
            marshalling.snowflakes("5")
