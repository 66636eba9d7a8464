from pytest import fixture


SAMPLE_DOCUMENT = """
{
    "keys": {
        "n": 4,
        "k": 3
    },
    "1": {
        "base": "10",
        "value": "4"
    },
    "2": {
        "base": "2",
        "value": "111"
    },
    "3": {
        "base": "10",
        "value": "12"
    },
    "6": {
        "base": "4",
        "value": "213"
    }
}
"""


@fixture
def sample_document():
    return SAMPLE_DOCUMENT


@fixture
def write_document(tmp_path):
    def _write_document(text, name="input.json"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write_document


@fixture
def share_document():
    """Builds a share document for the given polynomial and indices.

    ``bases`` is cycled over the indices so values are written in a mix of
    radixes.
    """
    from thresholdsecret.document import dumps
    from thresholdsecret.encoding import encode

    def _share_document(poly, n, k, indices, bases=(10,)):
        tree = {"keys": {"n": n, "k": k}}
        for i, index in enumerate(indices):
            base = bases[i % len(bases)]
            tree[str(index)] = {"base": str(base), "value": encode(poly(index), base)}
        return dumps(tree)

    return _share_document
