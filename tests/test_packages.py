from practicekit.packages import Dependency, Language, Package, PackageBuilder, main


def test_builder_defaults():
    package = PackageBuilder("base64").build()
    assert package == Package(
        name="base64", version="0.1", authors=[], dependencies=[], language=None
    )


def test_builder_chaining_sets_everything():
    dep = Dependency(name="log", version_expression="0.4")
    package = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(dep)
        .language(Language.RUST)
        .build()
    )
    assert package.name == "serde"
    assert package.version == "4.0"
    assert package.authors == ["djmitche"]
    assert package.dependencies == [dep]
    assert package.language is Language.RUST


def test_dependencies_keep_order():
    first = Dependency("a", "1")
    second = Dependency("b", "2")
    package = PackageBuilder("p").dependency(first).dependency(second).build()
    assert package.dependencies == [first, second]


def test_as_dependency_round_trip():
    package = PackageBuilder("log").version("0.4").build()
    dep = package.as_dependency()
    assert dep == Dependency(name=package.name, version_expression=package.version)


def test_authors_list_is_copied():
    authors = ["djmitche"]
    package = PackageBuilder("p").authors(authors).build()
    authors.append("other")
    assert package.authors == ["djmitche"]


def test_main_prints_packages(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "base64" in out
    assert "serde" in out
    assert "djmitche" in out