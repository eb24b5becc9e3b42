import pytest

from xcodebuild_action import inputs
from xcodebuild_action.destination import parse_destination
from xcodebuild_action.errors import InvalidInput, MalformedDestination
from xcodebuild_action.types import BuildConfiguration


def test_get_optional_input_treats_blank_as_absent() -> None:
    env = {"INPUT_SCHEME": "  ", "INPUT_DEVELOPMENT-TEAM": " TEAM123 "}
    assert inputs.get_optional_input("scheme", env) is None
    assert inputs.get_optional_input("development-team", env) == "TEAM123"
    assert inputs.get_optional_input("sdk", env) is None


def test_get_optional_input_name_mapping() -> None:
    env = {"INPUT_RESULT_BUNDLE": "x"}
    assert inputs.get_optional_input("result bundle", env) == "x"


@pytest.mark.parametrize("raw,want", [("true", True), ("True", True), ("TRUE", True), ("false", False), ("FALSE", False)])
def test_get_optional_bool_input(raw: str, want: bool) -> None:
    assert inputs.get_optional_bool_input("clean", {"INPUT_CLEAN": raw}) is want


def test_get_optional_bool_input_rejects_non_core_values() -> None:
    with pytest.raises(InvalidInput) as e:
        inputs.get_optional_bool_input("clean", {"INPUT_CLEAN": "yes"})
    assert "YAML 1.2" in str(e.value)


def test_get_optional_yes_no_input() -> None:
    assert inputs.get_optional_yes_no_input("X", {"INPUT_X": "YES"}) is True
    assert inputs.get_optional_yes_no_input("X", {"INPUT_X": "no"}) is False
    assert inputs.get_optional_yes_no_input("X", {}) is None
    with pytest.raises(InvalidInput):
        inputs.get_optional_yes_no_input("X", {"INPUT_X": "maybe"})


def test_parse_configuration_from_env() -> None:
    env = {
        "INPUT_WORKSPACE": "App.xcworkspace",
        "INPUT_SCHEME": "App",
        "INPUT_CONFIGURATION": "Release",
        "INPUT_DESTINATION": "platform=iOS Simulator,name=iPhone 14",
        "INPUT_CLEAN": "true",
        "INPUT_DISABLE-CODE-SIGNING": "false",
        "INPUT_CODE_SIGN_IDENTITY": "Apple Development",
        "INPUT_CODE_SIGNING_REQUIRED": "NO",
        "INPUT_CODE_SIGN_ENTITLEMENTS": "",
        "INPUT_CODE_SIGNING_ALLOWED": "YES",
        "INPUT_DEVELOPMENT-TEAM": "TEAM123",
        "INPUT_RESULT-BUNDLE-PATH": "Tests.xcresult",
        "INPUT_RESULT-BUNDLE-NAME": "results",
    }

    got = inputs.parse_configuration(env=env)
    assert got == BuildConfiguration(
        workspace="App.xcworkspace",
        scheme="App",
        configuration="Release",
        destination=parse_destination("platform=iOS Simulator,name=iPhone 14"),
        clean=True,
        disable_code_signing=False,
        code_sign_identity="Apple Development",
        code_signing_required=False,
        code_signing_allowed=True,
        development_team="TEAM123",
        result_bundle_path="Tests.xcresult",
        result_bundle_name="results",
    )
    assert got.code_sign_entitlements is None


def test_parse_configuration_overrides_win_over_env() -> None:
    env = {"INPUT_SCHEME": "Env", "INPUT_PROJECT": "Env.xcodeproj", "INPUT_CLEAN": "true"}

    got = inputs.parse_configuration(
        {"scheme": "Cli", "workspace": "Cli.xcworkspace", "clean": False, "sdk": None},
        env=env,
    )
    assert got.scheme == "Cli"
    assert got.workspace == "Cli.xcworkspace"
    assert got.project is None
    assert got.clean is False


def test_parse_configuration_rejects_malformed_destination() -> None:
    with pytest.raises(MalformedDestination):
        inputs.parse_configuration(env={"INPUT_DESTINATION": "platform"})


def test_parse_configuration_destination_override() -> None:
    got = inputs.parse_configuration(
        {"destination": "platform=macOS"},
        env={"INPUT_DESTINATION": "platform=iOS"},
    )
    assert got.destination == parse_destination("platform=macOS")


def test_parse_configuration_blank_overrides_fall_back_to_env() -> None:
    env = {"INPUT_SCHEME": "Env", "INPUT_DESTINATION": "platform=iOS"}

    got = inputs.parse_configuration({"scheme": "", "destination": "  ", "sdk": " "}, env=env)
    assert got.scheme == "Env"
    assert got.destination == parse_destination("platform=iOS")
    assert got.sdk is None


def test_parse_configuration_strips_override_values() -> None:
    got = inputs.parse_configuration({"scheme": " App "}, env={})
    assert got.scheme == "App"
