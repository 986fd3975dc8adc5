"""Unit tests for generation plan models and the YAML loader."""

import pytest
from pydantic import ValidationError

from propgen.schema import (
    DomainSchema,
    GenerationPlan,
    PlanLoadError,
    describe_validation_error,
    load_plan,
    save_plan,
    validate_plan_file,
)


class TestModels:
    """Test suite for the pydantic plan models."""

    def test_minimal_plan(self):
        plan = GenerationPlan(version="1.0.0", domains=[{"name": "n", "type": "Int"}])
        assert plan.iterations == 100
        assert plan.seed is None
        assert plan.get_domain("n").type == "Int"
        assert plan.get_domain("missing") is None

    @pytest.mark.parametrize("version", ["1.0", "1.0.x", "v1.0.0"])
    def test_bad_version(self, version):
        with pytest.raises(ValidationError):
            GenerationPlan(version=version, domains=[{"name": "n", "type": "Int"}])

    def test_domains_required(self):
        with pytest.raises(ValidationError):
            GenerationPlan(version="1.0.0", domains=[])

    def test_duplicate_domain_names(self):
        with pytest.raises(ValidationError, match="Duplicate domain name 'n'"):
            GenerationPlan(version="1.0.0", domains=[
                {"name": "n", "type": "Int"},
                {"name": "n", "type": "Long"},
            ])

    def test_min_above_max(self):
        with pytest.raises(ValidationError, match="must be <="):
            DomainSchema(name="n", type="Int", min=5, max=1)

    def test_negative_iterations(self):
        with pytest.raises(ValidationError):
            DomainSchema(name="n", type="Int", iterations=-1)

    def test_integer_edgecases_stay_integers(self):
        domain = DomainSchema(name="n", type="Int", edgecases=[1, 2])
        assert all(isinstance(e, int) for e in domain.edgecases)

    def test_integer_scale_stays_integer(self):
        assert type(DomainSchema(name="n", type="Int", scale=2).scale) is int
        assert type(DomainSchema(name="n", type="Int", scale=2.5).scale) is float


class TestLoader:
    """Test suite for loading and saving plan files."""

    def test_load_plan(self, plan_file):
        plan = load_plan(plan_file)
        assert plan.seed == 7
        assert [d.name for d in plan.domains] == ["age", "ratio"]
        assert plan.get_domain("age").edgecases == [0, 130]

    def test_missing_file(self, tmp_path):
        with pytest.raises(PlanLoadError) as exc_info:
            load_plan(tmp_path / "nope.yaml")
        assert exc_info.value.problems == ["plan file not found"]
        assert exc_info.value.path == tmp_path / "nope.yaml"

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text("{}")
        with pytest.raises(PlanLoadError, match=".yaml or .yml"):
            load_plan(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "plan.yaml"
        path.write_text("version: [unclosed\n")
        with pytest.raises(PlanLoadError, match="invalid YAML"):
            load_plan(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "plan.yml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(PlanLoadError, match="mapping"):
            load_plan(path)

    def test_validation_problems_name_locations(self, tmp_path):
        path = tmp_path / "plan.yaml"
        path.write_text('version: "1.0"\ndomains:\n  - name: n\n')
        with pytest.raises(PlanLoadError) as exc_info:
            load_plan(path)

        problems = exc_info.value.problems
        assert any(p.startswith("version: ") for p in problems)
        assert any(p.startswith("domains[0].type: ") for p in problems)
        assert len(problems) == 2

    def test_save_then_load(self, plan_file, tmp_path):
        plan = load_plan(plan_file)
        target = tmp_path / "out" / "copy.yaml"
        save_plan(plan, target)
        assert load_plan(target) == plan

    def test_validate_plan_file(self, plan_file, tmp_path):
        assert validate_plan_file(plan_file) == []
        assert validate_plan_file(tmp_path / "missing.yaml") == ["plan file not found"]


class TestDescribeValidationError:

    def test_one_line_per_problem(self):
        with pytest.raises(ValidationError) as exc_info:
            GenerationPlan(version="1.0.0", domains=[{"name": "a"}, {"type": "Int"}])

        lines = describe_validation_error(exc_info.value)
        assert [line.split(":")[0] for line in lines] == ["domains[0].type", "domains[1].name"]

    def test_model_level_problem(self):
        with pytest.raises(ValidationError) as exc_info:
            DomainSchema(name="n", type="Int", min=2, max=1)
        assert describe_validation_error(exc_info.value)[0].startswith("plan: ")
