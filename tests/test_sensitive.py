import pytest

from sigillium.sensitive import SensitiveBuffer, wipe


def test_wipe_zeroes_bytearray_in_place():
    buf = bytearray(b"correct horse battery staple")
    wipe(buf)
    assert buf == bytearray(len(buf))


def test_wipe_memoryview_slice():
    buf = bytearray(b"abcdef")
    wipe(memoryview(buf)[2:4])
    assert buf == bytearray(b"ab\x00\x00ef")


def test_wipe_empty_and_immutable():
    wipe(bytearray())
    with pytest.raises(TypeError):
        wipe(b"immutable")  # type: ignore[arg-type]


def test_buffer_copies_input():
    source = bytearray(b"secret")
    buf = SensitiveBuffer(source)
    source[:] = b"XXXXXX"
    assert buf.bytes() == b"secret"
    buf.wipe()


def test_context_manager_wipes_on_exit():
    with SensitiveBuffer.from_str("seed words") as buf:
        assert buf.decode() == "seed words"
        backing = buf._buf
    assert buf.released
    assert backing == bytearray(len(b"seed words"))


def test_context_manager_wipes_on_error():
    with pytest.raises(RuntimeError):
        with SensitiveBuffer(b"secret") as buf:
            raise RuntimeError("boom")
    assert buf.released


def test_access_after_wipe_raises():
    buf = SensitiveBuffer(b"secret")
    buf.wipe()
    buf.wipe()  # idempotent
    for access in (buf.view, buf.bytes, buf.decode):
        with pytest.raises(ValueError):
            access()
    with pytest.raises(ValueError):
        with buf:
            pass


def test_view_is_read_only():
    with SensitiveBuffer(b"secret") as buf:
        view = buf.view()
        assert bytes(view) == b"secret"
        with pytest.raises(TypeError):
            view[0] = 0


def test_repr_hides_contents():
    buf = SensitiveBuffer(b"hunter2")
    assert "hunter2" not in repr(buf)
    assert "7 bytes" in repr(buf)
    buf.wipe()
    assert "wiped" in repr(buf)
    assert len(buf) == 7
