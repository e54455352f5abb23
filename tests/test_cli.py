import json
from pathlib import Path

from click.testing import CliRunner

from hono_scaffold.__main__ import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCli:
    def test_scaffolds_app(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, ["my-app", "--spec", str(FIXTURES / "petstore.yaml")])

            assert result.exit_code == 0, result.output
            assert 'Generated "my-app"' in result.output
            assert "Next steps:" in result.output
            assert "  cd my-app" in result.output
            assert Path("my-app/src/routes/pets.routes.ts").is_file()

    def test_cors_flag(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, ["my-app", "-s", str(FIXTURES / "petstore.yaml"), "--cors"])

            assert result.exit_code == 0, result.output
            assert "cors()" in Path("my-app/src/app.ts").read_text()

    def test_existing_directory(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("my-app").mkdir()
            result = runner.invoke(main, ["my-app", "--spec", str(FIXTURES / "petstore.yaml")])

            assert result.exit_code == 1
            assert "already exists" in result.output

    def test_missing_spec_file(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, ["my-app", "--spec", "missing.yaml"])

            assert result.exit_code == 1
            assert "OpenAPI spec file not found" in result.output
            assert not Path("my-app").exists()

    def test_invalid_app_name(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, ["my app!", "--spec", str(FIXTURES / "petstore.yaml")])

            assert result.exit_code == 1
            assert "App name can only contain" in result.output

    def test_spec_option_required(self):
        result = CliRunner().invoke(main, ["my-app"])
        assert result.exit_code == 2

    def test_malformed_document_reported(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            doc = {"paths": {"/pets": {"get": {"parameters": [{"in": "query"}]}}}}
            Path("api.json").write_text(json.dumps(doc))
            result = runner.invoke(main, ["my-app", "--spec", "api.json"])

            assert result.exit_code == 1
            assert not isinstance(result.exception, KeyError)
            assert "Failed to create application" in result.output
            assert "Error: KeyError: 'name'" in result.output

    def test_directory_as_spec(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("specs").mkdir()
            result = runner.invoke(main, ["my-app", "--spec", "specs"])

            assert result.exit_code == 1
            assert "Failed to create application" in result.output
            assert "OpenAPI spec file not found" in result.output
            assert not Path("my-app").exists()
