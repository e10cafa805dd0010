from describe_action.render.grid import render_grid


def test_header_is_upper_cased_and_centred_with_extra_space_on_the_right():
    out = render_grid(["Name", "Desc"], [["`abcdefgh`", "short description"]])
    header = out.splitlines()[0]
    assert header == "|    NAME    |       DESC        |"


def test_columns_are_at_least_header_plus_two_wide():
    out = render_grid(["a", "bb"], [["xyz", "w"]])
    assert out.splitlines()[1] == "|-----|------|"


def test_cells_over_max_width_wrap_onto_continuation_lines():
    out = render_grid(["Name", "Desc"], [["`a`", "aaa bbb ccc"]], max_column_width=7)
    assert out == (
        "|  NAME  |  DESC   |\n"
        "|--------|---------|\n"
        "| `a`    | aaa bbb |\n"
        "|        | ccc     |\n"
    )


def test_embedded_newlines_become_separate_lines():
    out = render_grid(["Name", "Description"], [["`x`", "line one\nline two"]])
    assert out == (
        "|  NAME  |  DESCRIPTION  |\n"
        "|--------|---------------|\n"
        "| `x`    | line one      |\n"
        "|        | line two      |\n"
    )


def test_long_words_are_broken_at_max_width():
    out = render_grid(["N"], [["abcdefghij"]], max_column_width=4)
    assert out.splitlines()[2:] == ["| abcd |", "| efgh |", "| ij   |"]


def test_output_ends_with_newline():
    assert render_grid(["Name"], [["`x`"]]).endswith(" |\n")
