import pytest
from pathlib import Path
from sassimport.config.settings import ImporterSettings
from sassimport.core.materializer import ImportMaterializer
from sassimport.core.models import Dialect
from sassimport.environment.filesystem import FileSystemEnvironment
from sassimport.exceptions import EvaluationError

@pytest.fixture
def environment(tmp_path: Path):
    root = tmp_path / "stylesheets"
    root.mkdir()
    settings = ImporterSettings(roots=[root], root_path=tmp_path, template_vars={"brand": "#f00"})
    return FileSystemEnvironment(settings).compilation()

def write(environment, name: str, text: str) -> Path:
    path = environment.roots()[0] / name
    path.write_text(text, encoding="utf-8")
    return path

def test_bracketed_file_is_returned_as_evaluated(environment):
    path = write(environment, "_grid.scss", ".grid { display: grid; }\n")
    result = ImportMaterializer(environment).materialize(path)
    assert result.path == str(path)
    assert result.content == ".grid { display: grid; }\n"

def test_indented_file_is_converted(environment):
    path = write(environment, "_type.sass", "=big\n  font-size: 2em\n.title\n  +big\n")
    result = ImportMaterializer(environment).materialize(path)
    assert "@mixin big {" in result.content
    assert "@include big;" in result.content
    assert not any(line.startswith(("=", "+")) for line in result.content.splitlines())

def test_dialect_step_only_runs_for_indented_files(environment):
    scss = write(environment, "a.scss", ".a {}\n")
    sass = write(environment, "b.css.sass", ".b\n  c: d\n")
    materializer = ImportMaterializer(environment, convert_dialect=lambda text: "converted")
    assert materializer.materialize(scss).content == ".a {}\n"
    assert materializer.materialize(sass).content == "converted"

def test_explicit_dialect_overrides_detection(environment):
    path = write(environment, "a.scss", ".a {}\n")
    materializer = ImportMaterializer(environment, convert_dialect=str.upper)
    assert materializer.materialize(path, Dialect.INDENTED).content == ".A {}\n"

def test_compiler_engines_are_removed(environment):
    path = write(environment, "theme.css.scss.hbs", "")
    names = [p.name for p in ImportMaterializer(environment).processors_for(path)]
    assert names == ["charset", "handlebars"]

def test_templated_asset_is_rendered(environment):
    path = write(environment, "_theme.scss.hbs", ".a { color: {{brand}}; }\n")
    result = ImportMaterializer(environment).materialize(path)
    assert result.content == ".a { color: #f00; }\n"

def test_byte_order_mark_and_crlf_are_normalized(environment):
    path = environment.roots()[0] / "bom.scss"
    path.write_bytes(b"\xef\xbb\xbf.a {}\r\n")
    assert ImportMaterializer(environment).materialize(path).content == ".a {}\n"

def test_unreadable_file_propagates_evaluation_error(environment):
    with pytest.raises(EvaluationError):
        ImportMaterializer(environment).materialize(environment.roots()[0] / "gone.scss")

def test_invalid_utf8_propagates_evaluation_error(environment):
    path = environment.roots()[0] / "binary.scss"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(EvaluationError):
        ImportMaterializer(environment).materialize(path)

def test_conversion_errors_propagate(environment):
    path = write(environment, "broken.sass", ".a\n    color: red\n  margin: 0\n")
    with pytest.raises(EvaluationError):
        ImportMaterializer(environment).materialize(path)

def test_malformed_template_raises_evaluation_error(environment):
    path = write(environment, "_theme.scss.hbs", ".a { {{#if brand}}color: red;{{/each}} }\n")
    with pytest.raises(EvaluationError, match="failed to compile template"):
        ImportMaterializer(environment).materialize(path)
