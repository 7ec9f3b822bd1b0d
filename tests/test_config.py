from modelprint.config import PrintDefaults, get_print_defaults, set_print_defaults


def test_defaults_are_unicode_with_index_names():
    defaults = get_print_defaults()
    assert defaults.unicode is True
    assert defaults.noname is False


def test_defaults_are_copied_both_ways():
    saved = get_print_defaults()
    try:
        mine = PrintDefaults(unicode=False)
        set_print_defaults(mine)
        mine.unicode = True
        assert get_print_defaults().unicode is False

        fetched = get_print_defaults()
        fetched.noname = True
        assert get_print_defaults().noname is False
    finally:
        set_print_defaults(saved)
