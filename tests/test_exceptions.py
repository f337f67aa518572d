from testfacts.core.exceptions import (
    ConfigurationError,
    MessageArgumentError,
    MessageNotFoundError,
    ResourceError,
    TestFactsError,
    TestFailedError,
)
from testfacts.core.outcomes import SourceLocation, Succeeded, caller_location


def test_hierarchy():
    assert issubclass(TestFailedError, TestFactsError)
    assert issubclass(TestFailedError, AssertionError)
    assert issubclass(MessageArgumentError, ConfigurationError)
    assert issubclass(MessageNotFoundError, ResourceError)
    assert issubclass(ResourceError, TestFactsError)


def test_details_in_str():
    err = TestFactsError("bad", details={"k": 1})
    assert str(err) == "bad | Details: {'k': 1}"
    assert str(TestFactsError("plain")) == "plain"


def test_failed_error_str_is_message():
    loc = SourceLocation("test_x.py", 12, "test_y")
    err = TestFailedError("false: nope", location=loc)
    assert str(err) == "false: nope"
    assert err.failed_code_file_name_and_line_number == "test_x.py:12"
    assert TestFailedError("x").failed_code_file_name_and_line_number is None


def test_message_argument_error_fields():
    err = MessageArgumentError("raw_message", "{0} {1}", 2, 1)
    assert err.expected == 2
    assert err.actual == 1
    assert err.details["template"] == "{0} {1}"


def test_message_not_found_fields():
    err = MessageNotFoundError("k", "/tmp/m.yaml")
    assert err.key == "k"
    assert "'k' not found" in str(err)


def test_caller_location():
    def helper():
        return caller_location(2)

    loc = helper()
    assert loc.function == "test_caller_location"
    assert str(loc).endswith("in test_caller_location")


def test_succeeded_repr():
    assert repr(Succeeded) == "Succeeded"
