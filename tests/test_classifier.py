from shellargs import OptionCallbacks, OptionClassifier, classify


def _events(tokens: list[str]) -> list[tuple[str, ...]]:
    events: list[tuple[str, ...]] = []
    callbacks = OptionCallbacks(
        on_value=lambda value: events.append(("value", value)),
        on_option=lambda name: events.append(("option", name)),
        on_option_with_value=lambda name, value: events.append(("option_with_value", name, value)),
    )
    classify(tokens, callbacks)
    return events


def test_plain_values() -> None:
    assert _events(["a", "bee"]) == [("value", "a"), ("value", "bee")]


def test_empty_tokens_are_skipped() -> None:
    assert _events(["", "a", ""]) == [("value", "a")]


def test_lone_hyphen_is_a_value() -> None:
    assert _events(["-"]) == [("value", "-")]


def test_short_options() -> None:
    assert _events(["-x"]) == [("option", "x")]
    assert _events(["-x1"]) == [("option_with_value", "x", "1")]
    assert _events(["-abc"]) == [("option_with_value", "a", "bc")]
    assert _events(["-beep=boop"]) == [("option_with_value", "b", "eep=boop")]


def test_long_options() -> None:
    assert _events(["--name"]) == [("option", "name")]
    assert _events(["--name=value"]) == [("option_with_value", "name", "value")]
    assert _events(["--name="]) == [("option_with_value", "name", "")]
    assert _events(["--name=a=b"]) == [("option_with_value", "name", "a=b")]


def test_end_of_options_marker() -> None:
    events = _events(["-a", "--", "-b", "--c", "--", "d"])
    assert events == [
        ("option", "a"),
        ("value", "-b"),
        ("value", "--c"),
        ("value", "--"),
        ("value", "d"),
    ]


def test_classifier_instance_is_reusable() -> None:
    seen: list[str] = []
    classifier = OptionClassifier(
        OptionCallbacks(
            on_value=seen.append,
            on_option=seen.append,
            on_option_with_value=lambda name, value: seen.append(f"{name}={value}"),
        )
    )
    classifier.classify(["--", "-x"])
    classifier.classify(["-x", "--y=1"])
    assert seen == ["-x", "x", "y=1"]
