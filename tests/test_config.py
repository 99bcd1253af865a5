from description_sync.config import DEFAULT_SUMMARY_SEPARATOR, Settings


def test_settings_normalize_out_of_range_values() -> None:
    config = Settings(activity_window_minutes=0, workout_match_tolerance=3.0, summary_separator=" ", log_level="debug")
    assert config.activity_window_minutes == 60
    assert config.workout_match_tolerance == 1.0
    assert config.summary_separator == DEFAULT_SUMMARY_SEPARATOR
    assert config.log_level == "DEBUG"


def test_settings_keep_valid_values() -> None:
    config = Settings(sport_type="Ride", activity_window_minutes=15, workout_match_tolerance=0.1)
    assert config.sport_type == "Ride"
    assert config.activity_window_minutes == 15
    assert config.workout_match_tolerance == 0.1
