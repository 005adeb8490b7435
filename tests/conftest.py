import pytest


def numbered_lines(count):
    return b"".join(f"line {i}\n".encode() for i in range(1, count + 1))


@pytest.fixture
def make_file(tmp_path):
    def _make(content: bytes, name="input.txt"):
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)
    return _make
