from pathlib import Path

import yaml

from gstcalc.backend.config.rate_config import RATES_FILE, load_rate_table
from gstcalc.backend.config.validator import main, validate_rate_table, validate_rates_file


def _write(path: Path, rates: dict[str, object]) -> Path:
    path.write_text(yaml.safe_dump({"rates": rates}, sort_keys=False), encoding="utf-8")
    return path


def test_packaged_rate_table_is_valid() -> None:
    assert validate_rates_file(RATES_FILE) == []


def test_validator_flags_unsorted_categories(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "rates.yaml",
        {"exempted": 0, "standard": 18, "essential": 5, "luxury": 40},
    )

    errors = validate_rates_file(path)

    assert any("ascending rate order" in error for error in errors)


def test_validator_flags_duplicate_rates(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "rates.yaml",
        {"exempted": 0, "essential": 5, "standard": 18, "luxury": 40, "sin": 40},
    )

    errors = validate_rates_file(path)

    assert any("duplicate rate values detected: [40.0]" in error for error in errors)


def test_validator_reports_schema_failures(tmp_path: Path) -> None:
    path = _write(tmp_path / "broken.yaml", {"exempted": 0, "luxury": 400})

    errors = validate_rates_file(path)

    assert len(errors) == 1
    assert errors[0].startswith("broken.yaml: Rate table validation failed")


def test_validator_flags_out_of_bounds_copies() -> None:
    table = load_rate_table()
    broken = table.model_copy(
        update={"categories": {**table.categories, "luxury": 140.0}}
    )

    errors = validate_rate_table(broken)

    assert "rates.luxury: rate must be between 0 and 100" in errors


def test_validator_flags_missing_required_categories() -> None:
    table = load_rate_table()
    broken = table.model_copy(update={"categories": {"exempted": 0.0, "luxury": 40.0}})

    errors = validate_rate_table(broken)

    assert any("essential, standard" in error for error in errors)


def test_main_returns_non_zero_for_invalid_files(tmp_path: Path, capsys) -> None:
    good = _write(
        tmp_path / "good.yaml",
        {"exempted": 0, "essential": 5, "standard": 18, "luxury": 40},
    )
    bad = tmp_path / "missing.yaml"

    exit_code = main([str(good), str(bad)])

    output = capsys.readouterr().out
    assert exit_code == 1
    assert "[good.yaml] OK" in output
    assert "[missing.yaml] 1 issue(s) detected:" in output


def test_validator_flags_re_rated_fixed_categories() -> None:
    table = load_rate_table()
    broken = table.model_copy(
        update={"categories": {**table.categories, "luxury": 28.0, "essential": 12.0}}
    )

    errors = validate_rate_table(broken)

    assert "rates.luxury: fixed rate must stay at 40" in errors
    assert "rates.essential: fixed rate must stay at 5" in errors
