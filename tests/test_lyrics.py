from bottles.lyrics import Lyrics


def test_write_capitalizes_first_character_only():
    lyrics = Lyrics()
    lyrics.write("take one down, 98 BOTTLES")
    assert lyrics.lines == ("Take one down, 98 BOTTLES",)


def test_publish_joins_lines_with_trailing_newline():
    lyrics = Lyrics()
    lyrics.write("first line.")
    lyrics.write("second line.")
    assert len(lyrics) == 2
    assert lyrics.publish() == "First line.\nSecond line.\n"


def test_empty_line_and_empty_buffer():
    lyrics = Lyrics()
    assert lyrics.publish() == "\n"
    lyrics.write("")
    assert lyrics.lines == ("",)
