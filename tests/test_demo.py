from notifier.demo import build, run


def test_birthday_greets_walker_then_groomer(capsys):
    dog, walker, groomer = run("Snoopy", 5)
    out = capsys.readouterr().out.splitlines()

    assert dog.age == 6
    assert out[0] == "Hey Snoopy, happy 6 birthday from the dog walker."
    assert out[1] == "dogWalker: Old value is 5"
    assert out[2] == "dogWalker: New value is 6"
    assert out[3] == "Hey Snoopy, happy 6 birthday from the dog groomer."
    assert out[4] == "groomer oldValue: 5"
    assert out[5] == "groomer newValue: 6 "


def test_stopped_observer_is_silent(capsys):
    dog, walker, groomer = build("Rex", 2)
    walker.stop_observing()
    walker.stop_observing()

    dog.age = 3
    out = capsys.readouterr().out
    assert "dog walker" not in out
    assert "dog groomer" in out


def test_main_prints_greetings_and_metrics(monkeypatch, capsys):
    from notifier import demo

    monkeypatch.setattr(demo, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(demo.settings, "dog_name", "Snoopy")
    monkeypatch.setattr(demo.settings, "dog_age", 5)
    monkeypatch.setattr(demo.settings, "metrics_dump", True)

    assert demo.main() == 0
    out = capsys.readouterr().out
    assert "happy 6 birthday from the dog walker" in out
    assert "happy 6 birthday from the dog groomer" in out
    assert 'notifier_changes_total{attribute="age"}' in out
