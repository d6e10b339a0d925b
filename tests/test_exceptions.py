from tagged_result.exceptions import ConfigError, ResultError, TaggedResultException


class TestTaggedResultException:
    def test_is_exception(self) -> None:
        assert issubclass(TaggedResultException, Exception)

    def test_can_be_raised_and_caught(self) -> None:
        try:
            raise TaggedResultException("test")
        except TaggedResultException as e:
            assert str(e) == "test"


class TestResultError:
    def test_message_is_payload_string(self) -> None:
        assert str(ResultError(42)) == "42"

    def test_message_attribute_matches_str(self) -> None:
        err = ResultError(OSError("disk full"))
        assert err.message == "disk full"
        assert err.message == str(err)

    def test_keeps_payload(self) -> None:
        payload = {"code": 404}
        assert ResultError(payload).error is payload

    def test_name(self) -> None:
        assert ResultError("x").name == "ResultError"


class TestExceptionInheritance:
    def test_result_error_inherits_package_exception(self) -> None:
        assert issubclass(ResultError, TaggedResultException)

    def test_config_error_inherits_package_exception(self) -> None:
        assert issubclass(ConfigError, TaggedResultException)

    def test_config_error_still_caught_as_exception(self) -> None:
        try:
            raise ConfigError("config bad")
        except Exception as e:
            assert "config bad" in str(e)
