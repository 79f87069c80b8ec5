import pytest
from pathlib import Path
from unittest.mock import patch
from sassimport import Importer, ImportRequest
from sassimport.config.settings import ImporterSettings
from sassimport.environment.filesystem import CompilationContext, FileSystemEnvironment
from sassimport.exceptions import InvalidGlobPatternError

@pytest.fixture
def project(tmp_path: Path):
    """Creates an app root and a vendor root with partials, indented files and a glob target."""
    app = tmp_path / "app" / "stylesheets"
    (app / "components" / "forms").mkdir(parents=True)
    (app / "application.scss").write_text('@import "components/**/*";')
    (app / "_variables.scss").write_text("$gap: 4px;\n")
    (app / "_typography.sass").write_text("=heading\n  font-weight: bold\nh1\n  +heading\n")
    (app / "components" / "_alert.scss").write_text(".alert {}\n")
    (app / "components" / "card.scss").write_text(".card {}\n")
    (app / "components" / "forms" / "_input.scss").write_text(".input {}\n")

    vendor = tmp_path / "vendor" / "stylesheets"
    vendor.mkdir(parents=True)
    (vendor / "_reset.css").write_text("* { margin: 0; }\n")
    return tmp_path

@pytest.fixture
def settings(project: Path):
    return ImporterSettings(
        roots=["app/stylesheets", "vendor/stylesheets"],
        root_path=project,
    )

def test_single_import_returns_one_result(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    results = Importer(context, settings).imports("variables", str(project / "app/stylesheets/application.scss"))
    assert len(results) == 1
    assert results[0].path == str(project / "app/stylesheets/_variables.scss")
    assert results[0].content == "$gap: 4px;\n"
    assert context.dependencies == [project / "app/stylesheets/_variables.scss"]

def test_import_from_second_root(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    results = Importer(context, settings).imports("reset", str(project / "app/stylesheets/application.scss"))
    assert [r.path for r in results] == [str(project / "vendor/stylesheets/_reset.css")]

def test_unresolved_import_returns_empty_list(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    assert Importer(context, settings).imports("nope", str(project / "app/stylesheets/application.scss")) == []
    assert context.dependencies == []

def test_indented_import_is_converted(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    (result,) = Importer(context, settings).imports("typography", str(project / "app/stylesheets/application.scss"))
    assert result.content == "@mixin heading {\n  font-weight: bold;\n}\nh1 {\n  @include heading;\n}\n"

def test_glob_import_returns_sorted_results(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    parent = str(project / "app/stylesheets/application.scss")
    results = Importer(context, settings).imports("components/**/*", parent)
    components = project / "app/stylesheets/components"
    expected = [components / "_alert.scss", components / "card.scss", components / "forms" / "_input.scss"]
    assert [r.path for r in results] == [str(p) for p in expected]
    assert [r.content for r in results] == [".alert {}\n", ".card {}\n", ".input {}\n"]
    assert context.dependencies == expected

def test_glob_import_with_no_matches_is_not_an_error(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    parent = str(project / "app/stylesheets/application.scss")
    assert Importer(context, settings).imports("components/forms/missing/*", parent) == []

def test_invalid_glob_is_raised(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    with pytest.raises(InvalidGlobPatternError):
        Importer(context, settings).imports("components/**", str(project / "app/stylesheets/application.scss"))

def test_import_request(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    request = ImportRequest(raw_path="components/card", parent_path="application.scss")
    results = Importer(context, settings).import_request(request)
    assert [Path(r.path).name for r in results] == ["card.scss"]

def test_settings_default_to_environment_roots(settings, project):
    context = FileSystemEnvironment(settings).compilation()
    importer = Importer(context)
    assert importer.settings.roots == tuple(context.roots())
    assert importer.settings.partial_prefixes == ("", "_")

class CheckingContext(CompilationContext):
    """Fails evaluation of any file not yet recorded as a dependency."""
    def evaluate(self, path, processors):
        assert Path(path) in self.dependencies
        return super().evaluate(path, processors)

@pytest.mark.parametrize("raw_path", ["variables", "components/*"])
def test_dependency_is_recorded_before_materializing(settings, project, raw_path):
    context = CheckingContext(FileSystemEnvironment(settings))
    parent = str(project / "app/stylesheets/application.scss")
    with patch.object(context, "depend_on", wraps=context.depend_on) as depend_on:
        results = Importer(context, settings).imports(raw_path, parent)
    assert results
    assert depend_on.call_count == len(results)
    assert [Path(r.path) for r in results] == context.dependencies

def test_compilations_do_not_share_dependencies(settings, project):
    environment = FileSystemEnvironment(settings)
    first, second = environment.compilation(), environment.compilation()
    parent = str(project / "app/stylesheets/application.scss")
    Importer(first, settings).imports("variables", parent)
    Importer(second, settings).imports("reset", parent)
    assert first.dependencies == [project / "app/stylesheets/_variables.scss"]
    assert second.dependencies == [project / "vendor/stylesheets/_reset.css"]
