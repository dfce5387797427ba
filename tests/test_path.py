import pytest

from usdlite.path import Path, path


def test_append_property():
    base = Path("/foo")
    assert base.append_property("prop").as_str() == "/foo.prop"
    assert base.append_property("prop:foo:bar").as_str() == "/foo.prop:foo:bar"

    base = Path("/foo.prop")
    with pytest.raises(ValueError):
        base.append_property("prop2")
    with pytest.raises(ValueError):
        base.append_property("prop2:foo:bar")


@pytest.mark.parametrize("prop", ["", "."])
def test_append_invalid_property(prop):
    with pytest.raises(ValueError):
        Path("/foo").append_property(prop)


@pytest.mark.parametrize(
    "base, append, expected",
    [
        ("/prim", ".", "/prim"),
        ("/", "foo/bar.attr", "/foo/bar.attr"),
        ("/", "foo/bar.attr:argle:bargle", "/foo/bar.attr:argle:bargle"),
        ("/foo", "bar.attr", "/foo/bar.attr"),
        ("/foo", "bar.attr:argle:bargle", "/foo/bar.attr:argle:bargle"),
        ("/foo", "bar.rel[/target].attr", "/foo/bar.rel[/target].attr"),
        (
            "/foo",
            "bar.rel[/target].attr:argle:bargle",
            "/foo/bar.rel[/target].attr:argle:bargle",
        ),
        ("/foo", "bar.attr[/target.attr]", "/foo/bar.attr[/target.attr]"),
        (
            "/foo",
            "bar.attr[/target.attr:argle:bargle]",
            "/foo/bar.attr[/target.attr:argle:bargle]",
        ),
        (
            "/foo",
            "bar.attr.mapper[/target].arg",
            "/foo/bar.attr.mapper[/target].arg",
        ),
    ],
)
def test_append_path(base, append, expected):
    assert Path(base).append_path(append).as_str() == expected


def test_append_path_accepts_path_object():
    assert Path("/foo").append_path(Path("bar")).as_str() == "/foo/bar"


def test_append_invalid_path():
    with pytest.raises(ValueError):
        Path("/prim").append_path("/abs")
    with pytest.raises(ValueError):
        Path("/prim.attr").append_path("abs")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("/A/B/C", "/A/B/C"),
        ("/A/B{set=sel}C", "/A/B{set=sel}C"),
        ("/A/B/C{set=sel}", "/A/B/C"),
        ("/A/B/C.foo", "/A/B/C"),
        ("/A/B/C.foo:bar:baz", "/A/B/C"),
        ("/A/B/C.foo[target].bar", "/A/B/C"),
        ("/A/B/C.foo[target].bar:baz", "/A/B/C"),
        ("A/B/C.foo[target].bar", "A/B/C"),
        ("A/B/C.foo[target].bar:baz", "A/B/C"),
        ("../C.foo", "../C"),
        ("../C.foo:bar:baz", "../C"),
        ("../.foo[target].bar", ".."),
        ("../.foo[target].bar:baz", ".."),
    ],
)
def test_prim_path(text, expected):
    assert Path(text).prim_path().as_str() == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("/Foo/Bar.baz", True),
        ("Foo", False),
        ("Foo/Bar", False),
        ("Foo.bar", True),
        ("Foo/Bar.bar", True),
        (".bar", True),
        ("/Some/Kinda/Long/Path/Just/To/Make/Sure", False),
        ("Some/Kinda/Long/Path/Just/To/Make/Sure.property", True),
        ("../Some/Kinda/Long/Path/Just/To/Make/Sure", False),
        ("../../Some/Kinda/Long/Path/Just/To/Make/Sure.property", True),
        ("/Foo/Bar.baz[targ].boom", True),
        ("Foo.bar[targ].boom", True),
        (".bar[targ].boom", True),
        ("Foo.bar[targ.attr].boom", True),
        ("/A/B/C.rel3[/Blah].attr3", True),
        ("A/B.rel2[/A/B/C.rel3[/Blah].attr3].attr2", True),
        ("/A.rel1[/A/B.rel2[/A/B/C.rel3[/Blah].attr3].attr2].attr1", True),
    ],
)
def test_is_property(text, expected):
    assert Path(text).is_property_path() is expected


def test_path_cmp():
    assert Path("aaa") < Path("aab")
    assert Path("/") < Path("/a")
    assert Path("aab") > Path("aaa")
    assert Path("aaa") <= Path("aab")
    assert Path("aaa") <= Path("aaa")
    assert Path("aab") >= Path("aaa")
    assert Path("aaa") >= Path("aaa")


@pytest.mark.parametrize(
    "name",
    ["_", "x", "_1", "a1", "test", "_test", "test123", "Test", "teST", "TEST"],
)
def test_valid_identifier(name):
    assert Path.is_valid_identifier(name) is True


@pytest.mark.parametrize(
    "name",
    ["", " ", "?", "1", "x!", "_abc?", "_!", "test ", " test", "te st", "te.st", "te:st"],
)
def test_invalid_identifier(name):
    assert Path.is_valid_identifier(name) is False


@pytest.mark.parametrize(
    "name, expected",
    [
        ("inputs:diffuseColor", True),
        ("info.id", True),
        ("a:b.c", True),
        ("inputs:", False),
        (":inputs", False),
        ("inputs::x", False),
        ("inputs:1x", False),
    ],
)
def test_valid_namespace_identifier(name, expected):
    assert Path.is_valid_namespace_identifier(name) is expected


def test_abs_root():
    root = Path.abs_root()
    assert root.as_str() == "/"
    assert root.is_abs()
    assert not root.is_empty()


def test_is_abs_and_empty():
    assert not Path("foo/bar").is_abs()
    assert Path("").is_empty()
    assert Path().is_empty()


def test_append_variant_selection():
    assert Path("/Prim").append_variant_selection("shading", "red").as_str() == (
        "/Prim{shading=red}"
    )


@pytest.mark.parametrize(
    "base, variant_set, variant",
    [("/Prim.attr", "set", "sel"), ("/Prim", "", "sel"), ("/Prim", "set", "")],
)
def test_append_variant_selection_errors(base, variant_set, variant):
    with pytest.raises(ValueError):
        Path(base).append_variant_selection(variant_set, variant)


def test_variant_selection_prim_path_strips_selection():
    selected = Path("/A/B").append_variant_selection("set", "sel")
    assert selected.prim_path() == Path("/A/B")


def test_path_function_and_hash():
    built = path("/World/Mesh")
    assert built == Path("/World/Mesh")
    assert str(built) == "/World/Mesh"
    assert {built: 1}[Path("/World/Mesh")] == 1
    assert path(built) is built