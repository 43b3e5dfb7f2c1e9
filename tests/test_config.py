"""
Tests para configuración de la aplicación

Valida que la configuración se cargue correctamente desde variables de entorno
y que los valores por defecto sean apropiados.
"""

from unittest.mock import patch

from app.core.config import Settings


class TestSettings:
    """Tests para Settings"""

    @patch.dict('os.environ', {
        'TEAMS_CSV_URL': 'https://sheets.test/teams.csv',
        'PICKS_CSV_URL': 'https://sheets.test/picks.csv',
        'RACE_POINTS_CSV_URL': 'https://sheets.test/race_points.csv',
    })
    def test_settings_loads_from_env(self):
        """Validar que Settings carga desde variables de entorno"""
        settings = Settings()

        assert settings.csv_urls() == {
            "teams": "https://sheets.test/teams.csv",
            "picks": "https://sheets.test/picks.csv",
            "race_points": "https://sheets.test/race_points.csv",
        }

    def test_settings_default_values(self):
        """Validar valores por defecto de configuración"""
        settings = Settings(_env_file=None)

        assert settings.season_label == "2026"
        assert settings.buy_in_usd == 30
        assert settings.auto_zero_duplicates is True
        assert settings.fetch_timeout_seconds == 15.0
        assert [(w.label, w.min_race, w.max_race) for w in settings.windows()] == [
            ("1H", 1, 13),
            ("2H", 14, 26),
        ]

    @patch.dict('os.environ', {
        'HALVES': '{"Spring": {"min_race": 1, "max_race": 6}, "Summer": {"min_race": 7, "max_race": 12}, "Fall": {"min_race": 13, "max_race": 18}}',
        'AUTO_ZERO_DUPLICATES': 'false',
    })
    def test_settings_halves_from_json(self):
        """Validar que las mitades se lean como JSON y mantengan el orden"""
        settings = Settings()

        assert [w.label for w in settings.windows()] == ["Spring", "Summer", "Fall"]
        assert settings.windows()[1].min_race == 7
        assert settings.auto_zero_duplicates is False
