"""Built-in colour schemes, ayu-dark through monokai."""

from __future__ import annotations

from .colors import Color as C
from .colors import Theme


def ayu_dark() -> Theme:
    """Ayu Dark inspired colour scheme."""
    return Theme(
        background_left=C(10, 14, 20),
        background_right=C(15, 20, 25),
        editor_line_number=C(62, 68, 82),
        editor_line_number_cursor=C(89, 182, 215),
        editor_separator=C(62, 68, 82),
        editor_cursor_char_bg=C(255, 180, 84),
        editor_cursor_char_fg=C(15, 20, 25),
        editor_cursor_line_bg=C(22, 29, 37),
        file_tree_added=C(186, 230, 126),
        file_tree_deleted=C(242, 97, 103),
        file_tree_modified=C(255, 180, 84),
        file_tree_renamed=C(89, 182, 215),
        file_tree_directory=C(89, 182, 215),
        file_tree_current_file_bg=C(22, 29, 37),
        file_tree_current_file_fg=C(230, 237, 243),
        file_tree_default=C(230, 237, 243),
        file_tree_stats_added=C(186, 230, 126),
        file_tree_stats_deleted=C(242, 97, 103),
        terminal_command=C(230, 237, 243),
        terminal_output=C(62, 68, 82),
        terminal_cursor_bg=C(255, 180, 84),
        terminal_cursor_fg=C(15, 20, 25),
        status_hash=C(229, 181, 103),
        status_author=C(186, 230, 126),
        status_date=C(89, 182, 215),
        status_message=C(230, 237, 243),
        status_no_commit=C(62, 68, 82),
        separator=C(62, 68, 82),
        syntax_keyword=C(255, 140, 99),
        syntax_type=C(229, 181, 103),
        syntax_function=C(255, 214, 111),
        syntax_variable=C(230, 237, 243),
        syntax_string=C(186, 230, 126),
        syntax_number=C(239, 158, 222),
        syntax_comment=C(92, 99, 112),
        syntax_operator=C(242, 151, 24),
        syntax_punctuation=C(230, 237, 243),
        syntax_constant=C(89, 182, 215),
        syntax_parameter=C(255, 214, 111),
        syntax_property=C(115, 184, 205),
        syntax_label=C(255, 140, 99),
    )


def catppuccin() -> Theme:
    """Catppuccin Mocha inspired colour scheme."""
    return Theme(
        background_left=C(24, 24, 37),
        background_right=C(30, 30, 46),
        editor_line_number=C(108, 112, 134),
        editor_line_number_cursor=C(137, 180, 250),
        editor_separator=C(108, 112, 134),
        editor_cursor_char_bg=C(245, 194, 231),
        editor_cursor_char_fg=C(30, 30, 46),
        editor_cursor_line_bg=C(49, 50, 68),
        file_tree_added=C(166, 227, 161),
        file_tree_deleted=C(243, 139, 168),
        file_tree_modified=C(250, 179, 135),
        file_tree_renamed=C(137, 180, 250),
        file_tree_directory=C(203, 166, 247),
        file_tree_current_file_bg=C(49, 50, 68),
        file_tree_current_file_fg=C(205, 214, 244),
        file_tree_default=C(205, 214, 244),
        file_tree_stats_added=C(166, 227, 161),
        file_tree_stats_deleted=C(243, 139, 168),
        terminal_command=C(205, 214, 244),
        terminal_output=C(108, 112, 134),
        terminal_cursor_bg=C(245, 194, 231),
        terminal_cursor_fg=C(30, 30, 46),
        status_hash=C(249, 226, 175),
        status_author=C(166, 227, 161),
        status_date=C(137, 180, 250),
        status_message=C(205, 214, 244),
        status_no_commit=C(108, 112, 134),
        separator=C(108, 112, 134),
        syntax_keyword=C(203, 166, 247),
        syntax_type=C(249, 226, 175),
        syntax_function=C(137, 180, 250),
        syntax_variable=C(205, 214, 244),
        syntax_string=C(166, 227, 161),
        syntax_number=C(250, 179, 135),
        syntax_comment=C(108, 112, 134),
        syntax_operator=C(148, 226, 213),
        syntax_punctuation=C(186, 194, 222),
        syntax_constant=C(250, 179, 135),
        syntax_parameter=C(245, 194, 231),
        syntax_property=C(166, 227, 161),
        syntax_label=C(203, 166, 247),
    )


def dracula() -> Theme:
    """Dracula inspired colour scheme."""
    return Theme(
        background_left=C(33, 34, 44),
        background_right=C(40, 42, 54),
        editor_line_number=C(98, 114, 164),
        editor_line_number_cursor=C(139, 233, 253),
        editor_separator=C(98, 114, 164),
        editor_cursor_char_bg=C(255, 121, 198),
        editor_cursor_char_fg=C(40, 42, 54),
        editor_cursor_line_bg=C(68, 71, 90),
        file_tree_added=C(80, 250, 123),
        file_tree_deleted=C(255, 85, 85),
        file_tree_modified=C(255, 184, 108),
        file_tree_renamed=C(139, 233, 253),
        file_tree_directory=C(189, 147, 249),
        file_tree_current_file_bg=C(68, 71, 90),
        file_tree_current_file_fg=C(248, 248, 242),
        file_tree_default=C(248, 248, 242),
        file_tree_stats_added=C(80, 250, 123),
        file_tree_stats_deleted=C(255, 85, 85),
        terminal_command=C(248, 248, 242),
        terminal_output=C(98, 114, 164),
        terminal_cursor_bg=C(255, 121, 198),
        terminal_cursor_fg=C(40, 42, 54),
        status_hash=C(241, 250, 140),
        status_author=C(80, 250, 123),
        status_date=C(139, 233, 253),
        status_message=C(248, 248, 242),
        status_no_commit=C(98, 114, 164),
        separator=C(98, 114, 164),
        syntax_keyword=C(255, 121, 198),
        syntax_type=C(139, 233, 253),
        syntax_function=C(80, 250, 123),
        syntax_variable=C(248, 248, 242),
        syntax_string=C(241, 250, 140),
        syntax_number=C(189, 147, 249),
        syntax_comment=C(98, 114, 164),
        syntax_operator=C(255, 121, 198),
        syntax_punctuation=C(248, 248, 242),
        syntax_constant=C(189, 147, 249),
        syntax_parameter=C(255, 184, 108),
        syntax_property=C(80, 250, 123),
        syntax_label=C(255, 121, 198),
    )


def everforest() -> Theme:
    """Everforest Dark inspired colour scheme."""
    return Theme(
        background_left=C(41, 48, 42),
        background_right=C(45, 52, 46),
        editor_line_number=C(125, 135, 116),
        editor_line_number_cursor=C(131, 192, 146),
        editor_separator=C(125, 135, 116),
        editor_cursor_char_bg=C(131, 192, 146),
        editor_cursor_char_fg=C(45, 52, 46),
        editor_cursor_line_bg=C(57, 64, 58),
        file_tree_added=C(131, 192, 146),
        file_tree_deleted=C(230, 126, 128),
        file_tree_modified=C(219, 188, 127),
        file_tree_renamed=C(125, 192, 192),
        file_tree_directory=C(125, 192, 192),
        file_tree_current_file_bg=C(57, 64, 58),
        file_tree_current_file_fg=C(211, 198, 170),
        file_tree_default=C(211, 198, 170),
        file_tree_stats_added=C(131, 192, 146),
        file_tree_stats_deleted=C(230, 126, 128),
        terminal_command=C(211, 198, 170),
        terminal_output=C(125, 135, 116),
        terminal_cursor_bg=C(131, 192, 146),
        terminal_cursor_fg=C(45, 52, 46),
        status_hash=C(219, 188, 127),
        status_author=C(131, 192, 146),
        status_date=C(125, 192, 192),
        status_message=C(211, 198, 170),
        status_no_commit=C(125, 135, 116),
        separator=C(125, 135, 116),
        syntax_keyword=C(230, 126, 128),
        syntax_type=C(219, 188, 127),
        syntax_function=C(131, 192, 146),
        syntax_variable=C(211, 198, 170),
        syntax_string=C(219, 188, 127),
        syntax_number=C(211, 134, 155),
        syntax_comment=C(125, 135, 116),
        syntax_operator=C(230, 126, 128),
        syntax_punctuation=C(180, 166, 137),
        syntax_constant=C(211, 134, 155),
        syntax_parameter=C(219, 188, 127),
        syntax_property=C(125, 192, 192),
        syntax_label=C(230, 126, 128),
    )


def github_dark() -> Theme:
    """GitHub Dark inspired colour scheme."""
    return Theme(
        background_left=C(13, 17, 23),
        background_right=C(22, 27, 34),
        editor_line_number=C(110, 118, 129),
        editor_line_number_cursor=C(88, 166, 255),
        editor_separator=C(48, 54, 61),
        editor_cursor_char_bg=C(88, 166, 255),
        editor_cursor_char_fg=C(22, 27, 34),
        editor_cursor_line_bg=C(33, 38, 45),
        file_tree_added=C(63, 185, 80),
        file_tree_deleted=C(248, 81, 73),
        file_tree_modified=C(219, 109, 40),
        file_tree_renamed=C(88, 166, 255),
        file_tree_directory=C(88, 166, 255),
        file_tree_current_file_bg=C(33, 38, 45),
        file_tree_current_file_fg=C(230, 237, 243),
        file_tree_default=C(201, 209, 217),
        file_tree_stats_added=C(63, 185, 80),
        file_tree_stats_deleted=C(248, 81, 73),
        terminal_command=C(230, 237, 243),
        terminal_output=C(110, 118, 129),
        terminal_cursor_bg=C(88, 166, 255),
        terminal_cursor_fg=C(22, 27, 34),
        status_hash=C(219, 171, 9),
        status_author=C(63, 185, 80),
        status_date=C(88, 166, 255),
        status_message=C(230, 237, 243),
        status_no_commit=C(110, 118, 129),
        separator=C(48, 54, 61),
        syntax_keyword=C(255, 123, 114),
        syntax_type=C(255, 186, 77),
        syntax_function=C(210, 153, 255),
        syntax_variable=C(201, 209, 217),
        syntax_string=C(168, 219, 181),
        syntax_number=C(121, 192, 255),
        syntax_comment=C(139, 148, 158),
        syntax_operator=C(255, 123, 114),
        syntax_punctuation=C(201, 209, 217),
        syntax_constant=C(121, 192, 255),
        syntax_parameter=C(255, 186, 77),
        syntax_property=C(121, 192, 255),
        syntax_label=C(210, 153, 255),
    )


def gruvbox() -> Theme:
    """Gruvbox Dark inspired colour scheme."""
    return Theme(
        background_left=C(29, 32, 33),
        background_right=C(40, 40, 40),
        editor_line_number=C(146, 131, 116),
        editor_line_number_cursor=C(131, 165, 152),
        editor_separator=C(146, 131, 116),
        editor_cursor_char_bg=C(254, 128, 25),
        editor_cursor_char_fg=C(40, 40, 40),
        editor_cursor_line_bg=C(60, 56, 54),
        file_tree_added=C(184, 187, 38),
        file_tree_deleted=C(251, 73, 52),
        file_tree_modified=C(254, 128, 25),
        file_tree_renamed=C(131, 165, 152),
        file_tree_directory=C(131, 165, 152),
        file_tree_current_file_bg=C(60, 56, 54),
        file_tree_current_file_fg=C(235, 219, 178),
        file_tree_default=C(213, 196, 161),
        file_tree_stats_added=C(184, 187, 38),
        file_tree_stats_deleted=C(251, 73, 52),
        terminal_command=C(235, 219, 178),
        terminal_output=C(146, 131, 116),
        terminal_cursor_bg=C(254, 128, 25),
        terminal_cursor_fg=C(40, 40, 40),
        status_hash=C(250, 189, 47),
        status_author=C(184, 187, 38),
        status_date=C(131, 165, 152),
        status_message=C(235, 219, 178),
        status_no_commit=C(146, 131, 116),
        separator=C(146, 131, 116),
        syntax_keyword=C(251, 73, 52),
        syntax_type=C(250, 189, 47),
        syntax_function=C(184, 187, 38),
        syntax_variable=C(235, 219, 178),
        syntax_string=C(184, 187, 38),
        syntax_number=C(211, 134, 155),
        syntax_comment=C(146, 131, 116),
        syntax_operator=C(251, 73, 52),
        syntax_punctuation=C(213, 196, 161),
        syntax_constant=C(211, 134, 155),
        syntax_parameter=C(254, 128, 25),
        syntax_property=C(184, 187, 38),
        syntax_label=C(251, 73, 52),
    )


def material() -> Theme:
    """Material Theme inspired colour scheme."""
    return Theme(
        background_left=C(38, 50, 56),
        background_right=C(38, 50, 56),
        editor_line_number=C(84, 110, 122),
        editor_line_number_cursor=C(128, 203, 196),
        editor_separator=C(84, 110, 122),
        editor_cursor_char_bg=C(255, 203, 107),
        editor_cursor_char_fg=C(38, 50, 56),
        editor_cursor_line_bg=C(55, 71, 79),
        file_tree_added=C(195, 232, 141),
        file_tree_deleted=C(255, 83, 112),
        file_tree_modified=C(255, 203, 107),
        file_tree_renamed=C(128, 203, 196),
        file_tree_directory=C(137, 221, 255),
        file_tree_current_file_bg=C(55, 71, 79),
        file_tree_current_file_fg=C(238, 255, 255),
        file_tree_default=C(238, 255, 255),
        file_tree_stats_added=C(195, 232, 141),
        file_tree_stats_deleted=C(255, 83, 112),
        terminal_command=C(238, 255, 255),
        terminal_output=C(84, 110, 122),
        terminal_cursor_bg=C(255, 203, 107),
        terminal_cursor_fg=C(38, 50, 56),
        status_hash=C(255, 203, 107),
        status_author=C(195, 232, 141),
        status_date=C(128, 203, 196),
        status_message=C(238, 255, 255),
        status_no_commit=C(84, 110, 122),
        separator=C(84, 110, 122),
        syntax_keyword=C(199, 146, 234),
        syntax_type=C(255, 203, 107),
        syntax_function=C(130, 170, 255),
        syntax_variable=C(238, 255, 255),
        syntax_string=C(195, 232, 141),
        syntax_number=C(247, 140, 108),
        syntax_comment=C(84, 110, 122),
        syntax_operator=C(137, 221, 255),
        syntax_punctuation=C(144, 164, 174),
        syntax_constant=C(137, 221, 255),
        syntax_parameter=C(255, 203, 107),
        syntax_property=C(128, 203, 196),
        syntax_label=C(199, 146, 234),
    )


def monokai() -> Theme:
    """Monokai inspired colour scheme."""
    return Theme(
        background_left=C(30, 30, 30),
        background_right=C(39, 40, 34),
        editor_line_number=C(117, 113, 94),
        editor_line_number_cursor=C(102, 217, 239),
        editor_separator=C(117, 113, 94),
        editor_cursor_char_bg=C(253, 151, 31),
        editor_cursor_char_fg=C(39, 40, 34),
        editor_cursor_line_bg=C(51, 51, 45),
        file_tree_added=C(166, 226, 46),
        file_tree_deleted=C(249, 38, 114),
        file_tree_modified=C(253, 151, 31),
        file_tree_renamed=C(102, 217, 239),
        file_tree_directory=C(174, 129, 255),
        file_tree_current_file_bg=C(51, 51, 45),
        file_tree_current_file_fg=C(248, 248, 242),
        file_tree_default=C(248, 248, 242),
        file_tree_stats_added=C(166, 226, 46),
        file_tree_stats_deleted=C(249, 38, 114),
        terminal_command=C(248, 248, 242),
        terminal_output=C(117, 113, 94),
        terminal_cursor_bg=C(253, 151, 31),
        terminal_cursor_fg=C(39, 40, 34),
        status_hash=C(230, 219, 116),
        status_author=C(166, 226, 46),
        status_date=C(102, 217, 239),
        status_message=C(248, 248, 242),
        status_no_commit=C(117, 113, 94),
        separator=C(117, 113, 94),
        syntax_keyword=C(249, 38, 114),
        syntax_type=C(102, 217, 239),
        syntax_function=C(166, 226, 46),
        syntax_variable=C(248, 248, 242),
        syntax_string=C(230, 219, 116),
        syntax_number=C(174, 129, 255),
        syntax_comment=C(117, 113, 94),
        syntax_operator=C(249, 38, 114),
        syntax_punctuation=C(248, 248, 242),
        syntax_constant=C(174, 129, 255),
        syntax_parameter=C(253, 151, 31),
        syntax_property=C(166, 226, 46),
        syntax_label=C(249, 38, 114),
    )