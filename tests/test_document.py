from pytest import mark, raises

from thresholdsecret.document import MAX_DEPTH, Kind, dumps, kind_of, parse
from thresholdsecret.exceptions import MalformedDocument


def test_parse_sample(sample_document):
    tree = parse(sample_document)
    assert list(tree) == ["keys", "1", "2", "3", "6"]
    assert tree["keys"] == {"n": 4, "k": 3}
    assert tree["2"] == {"base": "2", "value": "111"}
    assert tree["6"] == {"base": "4", "value": "213"}


def test_parse_compact():
    tree = parse('{"keys":{"n":1,"k":1},"1":{"base":"16","value":"ff"}}')
    assert tree == {"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": "ff"}}


def test_quoted_content_is_opaque():
    tree = parse('{"a": "x,{y}:z", "b": 1, "c": "}"}')
    assert tree == {"a": "x,{y}:z", "b": 1, "c": "}"}


def test_escaped_quote_does_not_end_string():
    tree = parse('{"a": "say \\"hi, there\\"", "b": 2}')
    assert tree == {"a": 'say \\"hi, there\\"', "b": 2}


def test_numbers():
    tree = parse(
        '{"i": 42, "neg": -3, "f": 1.5, "e": 2.5e3, "dot": 7., '
        '"big": 123456789012345678901234567890}'
    )
    assert tree["i"] == 42 and type(tree["i"]) is int
    assert tree["neg"] == -3
    assert tree["f"] == 1.5 and type(tree["f"]) is float
    assert tree["e"] == 2500.0
    assert tree["dot"] == 7.0
    assert tree["big"] == 123456789012345678901234567890


@mark.parametrize("token", ["abc", "true", "null", "1e5", "1_000", "0x10", "1.2.3"])
def test_unparseable_tokens_are_kept_as_strings(token):
    assert parse('{"a": %s}' % token) == {"a": token}


def test_whitespace_and_unquoted_keys():
    tree = parse('\n  { keys :  { n : 5 ,k:2 } ,\t"1" : { "base" : "10" } }  \n')
    assert tree == {"keys": {"n": 5, "k": 2}, "1": {"base": "10"}}


def test_empty_objects():
    assert parse("{}") == {}
    assert parse("  {  }  ") == {}
    assert parse('{"a": {}}') == {"a": {}}


def test_deep_nesting():
    assert parse('{"a": {"b": {"c": {"d": "e"}}}}') == {"a": {"b": {"c": {"d": "e"}}}}


def test_last_duplicate_key_wins():
    assert parse('{"a": 1, "a": 2}') == {"a": 2}


@mark.parametrize(
    "text",
    [
        "",
        "   ",
        "[]",
        '"a"',
        '{"a": 1',
        '"a": 1}',
        '{"a" 1}',
        '{"a": 1: 2}',
        '{"a": {"b": 1}',
        '{"a": "x}',
        "{}{}",
        '{"a": 1}}',
        '{"a": 1,}',
        '{, "a": 1}',
    ],
)
def test_malformed(text):
    with raises(MalformedDocument):
        parse(text)


def test_kind_of():
    assert kind_of({}) == Kind.OBJECT
    assert kind_of("1") == Kind.STRING
    assert kind_of(1) == Kind.INTEGER
    assert kind_of(1.0) == Kind.FLOAT
    for value in (None, [], True):
        with raises(TypeError):
            kind_of(value)


def test_dumps():
    assert dumps({}) == "{}"
    text = '{"a": {"b": "c"}, "n": 3, "f": 0.5}'
    assert dumps({"a": {"b": "c"}, "n": 3, "f": 0.5}) == text


def test_reparse_canonical_form(sample_document):
    trees = [
        parse(sample_document),
        {"a": 1e20, "b": -2.5e-7, "c": -12, "d": {"e": {}, "f": "x, y: {z}"}},
    ]
    for tree in trees:
        text = dumps(tree)
        assert parse(text) == tree
        assert dumps(parse(text)) == text


def test_nesting_limit():
    def nested(levels):
        return '{"a": ' * (levels - 1) + "{}" + "}" * (levels - 1)

    tree = parse(nested(MAX_DEPTH))
    for _ in range(MAX_DEPTH - 1):
        tree = tree["a"]
    assert tree == {}

    with raises(MalformedDocument):
        parse(nested(MAX_DEPTH + 1))
    with raises(MalformedDocument):
        parse(nested(5000))
