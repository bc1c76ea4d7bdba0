from ruriko import version


def test_default_info():
    assert version.info() == "v0.0.0-dev (unknown) built at unknown"


def test_info_reflects_build_values(monkeypatch):
    monkeypatch.setattr(version, "VERSION", "v1.2.3")
    monkeypatch.setattr(version, "GIT_COMMIT", "abc1234")
    monkeypatch.setattr(version, "BUILD_TIME", "2024-01-01_00:00:00")
    result = version.info()
    assert result.startswith("v1.2.3 (abc1234)")
    assert result.endswith("2024-01-01_00:00:00")