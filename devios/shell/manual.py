"""
Manual Pages

Pages shown by ``man <command>`` and ``ls --help``.
"""

from typing import Optional, List

from devios.i18n import Locale
from .records import RecordKind, ResultRecord


# (kind, zh_TW text, en_US text) per line
PageLine = tuple[RecordKind, str, str]

_PRESS_Q: PageLine = (RecordKind.INFO, '按 q 離開', 'Press q to exit')

MANUAL_PAGES: dict[str, List[PageLine]] = {
    'ls': [
        (RecordKind.INFO,
         'LS(1)                   用戶命令                   LS(1)',
         'LS(1)                 User Commands                 LS(1)'),
        (RecordKind.SYSTEM, '名稱', 'NAME'),
        (RecordKind.SUCCESS, '       ls - 列出目錄內容', '       ls - list directory contents'),
        (RecordKind.SYSTEM, '簡介', 'SYNOPSIS'),
        (RecordKind.SUCCESS, '       ls [選項]... [檔案]...', '       ls [OPTION]... [FILE]...'),
        (RecordKind.SYSTEM, '描述', 'DESCRIPTION'),
        (RecordKind.SUCCESS,
         '       列出指定檔案的資訊（預設為目前的目錄）。',
         '       List information about the FILEs (the current directory by default).'),
        (RecordKind.SUCCESS,
         '       目錄排在檔案之前，並以字母順序排列項目。',
         '       Directories are listed before files, each sorted alphabetically.'),
        (RecordKind.SYSTEM, '選項', 'OPTIONS'),
        (RecordKind.SUCCESS, '       -a, --all', '       -a, --all'),
        (RecordKind.SUCCESS,
         '              不隱藏以 . 開頭的項目',
         '              do not ignore entries starting with .'),
        (RecordKind.SUCCESS, '       -l     使用較長格式列出', '       -l     use a long listing format'),
        (RecordKind.SUCCESS, '       --help 顯示此說明', '       --help display this help'),
        _PRESS_Q,
    ],
    'cd': [
        (RecordKind.INFO,
         'CD(1)                    用戶命令                   CD(1)',
         'CD(1)                 User Commands                 CD(1)'),
        (RecordKind.SYSTEM, '名稱', 'NAME'),
        (RecordKind.SUCCESS, '       cd - 變更目錄', '       cd - change directory'),
        (RecordKind.SYSTEM, '簡介', 'SYNOPSIS'),
        (RecordKind.SUCCESS, '       cd [目錄]', '       cd [directory]'),
        (RecordKind.SYSTEM, '描述', 'DESCRIPTION'),
        (RecordKind.SUCCESS,
         '       變更當前工作目錄為指定的目錄。',
         '       Change the current working directory to the specified directory.'),
        (RecordKind.SUCCESS,
         '       預設的目錄是 HOME shell 變數的值。',
         '       The default directory is the value of the HOME shell variable.'),
        (RecordKind.SUCCESS,
         '       "cd -" 返回上一個目錄。',
         '       "cd -" returns to the previous directory.'),
        _PRESS_Q,
    ],
    'cat': [
        (RecordKind.INFO,
         'CAT(1)                   用戶命令                  CAT(1)',
         'CAT(1)                User Commands                CAT(1)'),
        (RecordKind.SYSTEM, '名稱', 'NAME'),
        (RecordKind.SUCCESS, '       cat - 顯示檔案內容', '       cat - print file contents'),
        (RecordKind.SYSTEM, '簡介', 'SYNOPSIS'),
        (RecordKind.SUCCESS, '       cat [檔案]', '       cat [FILE]'),
        (RecordKind.SYSTEM, '描述', 'DESCRIPTION'),
        (RecordKind.SUCCESS,
         '       以目前的語言顯示檔案內容。',
         '       Print the contents of FILE in the current language.'),
        (RecordKind.SUCCESS,
         '       PDF 檔案會改為下載。',
         '       PDF files are downloaded instead.'),
        _PRESS_Q,
    ],
}


def manual_page(name: str, locale: Locale) -> Optional[List[ResultRecord]]:
    """Render a page, or None if there is no page for ``name``."""
    page = MANUAL_PAGES.get(name)
    if page is None:
        return None

    return [
        ResultRecord(kind, en if locale == Locale.EN_US else zh)
        for kind, zh, en in page
    ]
