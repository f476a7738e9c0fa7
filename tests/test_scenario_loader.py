from pathlib import Path
import tempfile
import unittest

from logistic_growth.io_paths import SCENARIOS_DIR
from logistic_growth.params import DEFAULT_Y0S, InitialCondition, InvalidParameterError, ParameterSet
from logistic_growth.scenario_loader import load_scenario, scenario_to_dict, validate_scenario_dict


class TestScenarioLoader(unittest.TestCase):
    def _write_temp(self, text: str, suffix: str) -> Path:
        tmp = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
        tmp.write(text.encode("utf-8"))
        tmp.flush()
        tmp.close()
        return Path(tmp.name)

    def test_valid_yaml(self):
        p = self._write_temp(
            """
name: testy
parameters:
  r: 0.1
  K: 2.0
  tf: 50
  h: 2.5
initial_conditions:
  - {y0: 0.5, active: true}
  - {y0: 3.0, active: false}
  - 1.0
            """,
            ".yaml",
        )
        try:
            scenario = load_scenario(p)
            self.assertEqual(scenario.name, "testy")
            self.assertEqual(scenario.params, ParameterSet(r=0.1, K=2.0, tf=50.0, h=2.5))
            self.assertEqual(
                scenario.conditions,
                [InitialCondition(0.5), InitialCondition(3.0, active=False), InitialCondition(1.0)],
            )
            self.assertEqual(scenario.active_count, 2)
        finally:
            p.unlink(missing_ok=True)

    def test_defaults_when_blocks_missing(self):
        p = self._write_temp("name: defaults\n", ".yml")
        try:
            scenario = load_scenario(p)
            self.assertEqual(scenario.params, ParameterSet(r=0.05, K=1.0, tf=100.0, h=5.0))
            self.assertEqual([c.y0 for c in scenario.conditions], list(DEFAULT_Y0S))
            self.assertTrue(all(c.active for c in scenario.conditions))
        finally:
            p.unlink(missing_ok=True)

    def test_partial_parameters_and_json(self):
        p = self._write_temp('{"parameters": {"h": "0.5"}, "initial_conditions": [0.2]}', ".json")
        try:
            scenario = load_scenario(p)
            # name falls back to the file stem
            self.assertEqual(scenario.name, p.stem)
            self.assertEqual(scenario.params.h, 0.5)
            self.assertEqual(scenario.params.r, 0.05)
            self.assertEqual(scenario.params.num_steps, 200)
        finally:
            p.unlink(missing_ok=True)

    def test_unknown_parameter_suggests_match(self):
        with self.assertRaises(ValueError) as ctx:
            validate_scenario_dict({"parameters": {"k": 1.0}})
        self.assertIn("did you mean", str(ctx.exception))
        self.assertIn("K", str(ctx.exception))

    def test_unknown_top_level_key(self):
        with self.assertRaises(ValueError):
            validate_scenario_dict({"params": {"r": 0.1}})

    def test_invalid_values(self):
        with self.assertRaises(InvalidParameterError):
            validate_scenario_dict({"parameters": {"h": 0}})
        with self.assertRaises(InvalidParameterError):
            validate_scenario_dict({"parameters": {"tf": -1}})
        with self.assertRaises(ValueError):
            validate_scenario_dict({"parameters": {"r": "fast"}})
        with self.assertRaises(ValueError):
            validate_scenario_dict({"parameters": {"r": True}})

    def test_condition_validation(self):
        scenario = validate_scenario_dict({"initial_conditions": [{"y0": "0.3", "active": "false"}]})
        self.assertEqual(scenario.conditions, [InitialCondition(0.3, active=False)])
        self.assertEqual(scenario.active_count, 0)
        with self.assertRaises(ValueError):
            validate_scenario_dict({"initial_conditions": [{"active": True}]})
        with self.assertRaises(ValueError):
            validate_scenario_dict({"initial_conditions": [{"y0": 0.3, "enabled": True}]})
        with self.assertRaises(ValueError):
            validate_scenario_dict({"initial_conditions": 0.3})

    def test_active_flag_accepts_integer_zero_and_one(self):
        p = self._write_temp(
            """
initial_conditions:
  - {y0: 0.2, active: 1}
  - {y0: 0.4, active: 0}
  - {y0: 0.6, active: "0"}
""",
            ".yaml",
        )
        try:
            scenario = load_scenario(p)
            self.assertEqual([c.active for c in scenario.conditions], [True, False, False])
        finally:
            p.unlink(missing_ok=True)
        for bad in (2, -1, 0.5, None):
            with self.assertRaises(ValueError, msg=repr(bad)):
                validate_scenario_dict({"initial_conditions": [{"y0": 0.2, "active": bad}]})

    def test_root_must_be_mapping(self):
        p = self._write_temp("- 1\n- 2\n", ".yaml")
        try:
            with self.assertRaises(ValueError):
                load_scenario(p)
        finally:
            p.unlink(missing_ok=True)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_scenario(Path("does/not/exist.yaml"))

    def test_round_trip_dict(self):
        scenario = validate_scenario_dict({"name": "x", "initial_conditions": [0.4, {"y0": 2.0, "active": False}]})
        self.assertEqual(validate_scenario_dict(scenario_to_dict(scenario)), scenario)

    def test_shipped_presets_load(self):
        baseline = load_scenario(SCENARIOS_DIR / "baseline.yaml")
        self.assertEqual(baseline.name, "baseline")
        self.assertEqual(len(baseline.conditions), 5)
        self.assertEqual(baseline.params.h, 5.0)

        fine = load_scenario(SCENARIOS_DIR / "fine_step.yaml")
        self.assertEqual(fine.params.h, 0.5)

        fixed = load_scenario(SCENARIOS_DIR / "fixed_point.json")
        self.assertEqual([c.y0 for c in fixed.conditions], [1.0, 0.0])


if __name__ == "__main__":
    unittest.main()
