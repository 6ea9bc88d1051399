import io

from yamlnode.writer import OutputWriter


def test_fresh_writer_is_at_origin():
    writer = OutputWriter()
    assert (writer.pos, writer.row, writer.col) == (0, 0, 0)
    assert writer.getvalue() == ""
    assert writer.comment is False


def test_buffered_writes_concatenate():
    writer = OutputWriter()
    writer.write("key: ")
    writer.write("value")
    assert writer.getvalue() == "key: value"
    assert writer.pos == len("key: value")
    assert writer.row == 0
    assert writer.col == len("key: value")


def test_newline_advances_row_and_resets_column():
    writer = OutputWriter()
    text = "ab\ncd"
    writer.write(text)
    assert writer.row == 1
    assert writer.col == 2
    assert writer.pos == len(text)


def test_trailing_newline_leaves_column_zero():
    writer = OutputWriter()
    writer.write("a\nb\n")
    assert writer.row == 2
    assert writer.col == 0


def test_newline_clears_comment_flag():
    writer = OutputWriter()
    writer.comment = True
    writer.write("# note")
    assert writer.comment is True
    writer.write("\n")
    assert writer.comment is False


def test_stream_receives_text_and_buffer_stays_empty():
    stream = io.StringIO()
    writer = OutputWriter(stream)
    writer.write("x\ny")
    assert stream.getvalue() == "x\ny"
    assert writer.getvalue() == ""
    assert writer.pos == len("x\ny")
    assert writer.row == 1


def test_empty_write_changes_nothing():
    writer = OutputWriter()
    writer.write("")
    assert (writer.pos, writer.row, writer.col) == (0, 0, 0)