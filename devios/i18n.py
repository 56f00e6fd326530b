"""
DeviOS Localised Strings

Every user-facing line the terminal core produces, keyed by message id,
with one variant per supported locale. Parameters are written as ``$1``,
``$2`` ... and substituted positionally.

Author: Deviser
Version: 1.0.0
"""

from enum import Enum
from typing import Optional


class Locale(Enum):
    """Supported content languages."""
    ZH_TW = "zh_TW"
    EN_US = "en_US"

    @classmethod
    def from_code(cls, code: str) -> 'Locale':
        """Parse a locale code such as 'en_US'."""
        for locale in cls:
            if locale.value == code:
                return locale
        raise ValueError(f"Unsupported locale: {code}")


DEFAULT_LOCALE = Locale.ZH_TW


MESSAGES: dict[str, dict[Locale, str]] = {
    # Welcome banner
    'welcome_banner': {
        Locale.ZH_TW: '=========== $1 終端機 v$2 ===========',
        Locale.EN_US: '=========== $1 Terminal v$2 ===========',
    },
    'welcome_title': {
        Locale.ZH_TW: '歡迎使用 Deviser 終端機風格個人網站！',
        Locale.EN_US: 'Welcome to Deviser Terminal-style Personal Website!',
    },
    'welcome_guide': {
        Locale.ZH_TW: '基本使用說明:',
        Locale.EN_US: 'Basic Usage Guide:',
    },
    'welcome_help': {
        Locale.ZH_TW: '輸入 "help" 查看可用命令列表',
        Locale.EN_US: '1. Type "help" to see available commands',
    },
    'welcome_start': {
        Locale.ZH_TW: '輸入 "deviser start" 啟動 deviser 服務。',
        Locale.EN_US: 'Start exploring! Type "deviser start" to enable all features.',
    },

    # Help, restricted mode
    'help_basic_title': {
        Locale.ZH_TW: '=== 基本命令列表 ===',
        Locale.EN_US: '=== Basic Command List ===',
    },
    'help_basic_help': {
        Locale.ZH_TW: 'help        - 顯示此幫助信息',
        Locale.EN_US: 'help        - Show this help message',
    },
    'help_basic_start': {
        Locale.ZH_TW: 'deviser start - 啟動 deviser 服務',
        Locale.EN_US: 'deviser start - Start deviser service',
    },
    'help_basic_tip': {
        Locale.ZH_TW: '提示: 輸入 "deviser start" 以啟動 deviser 服務以顯示更多內容',
        Locale.EN_US: 'Tip: Type "deviser start" to start deviser service and see more content',
    },

    # Help, full mode
    'help_title': {
        Locale.ZH_TW: '=== 可用命令列表 ===',
        Locale.EN_US: '=== Available Commands ===',
    },
    'help_ls': {
        Locale.ZH_TW: 'ls          - 列出當前目錄內容',
        Locale.EN_US: 'ls          - List directory contents',
    },
    'help_cd': {
        Locale.ZH_TW: 'cd [目錄]    - 切換目錄',
        Locale.EN_US: 'cd [dir]    - Change directory',
    },
    'help_cat': {
        Locale.ZH_TW: 'cat [檔案]   - 顯示檔案內容',
        Locale.EN_US: 'cat [file]  - Display file contents',
    },
    'help_pwd': {
        Locale.ZH_TW: 'pwd         - 顯示當前路徑',
        Locale.EN_US: 'pwd         - Print working directory',
    },
    'help_whoami': {
        Locale.ZH_TW: 'whoami      - 顯示當前使用者',
        Locale.EN_US: 'whoami      - Display current user',
    },
    'help_id': {
        Locale.ZH_TW: 'id          - 顯示使用者與群組識別碼',
        Locale.EN_US: 'id          - Display user and group ids',
    },
    'help_date': {
        Locale.ZH_TW: 'date        - 顯示當前日期',
        Locale.EN_US: 'date        - Display current date',
    },
    'help_man': {
        Locale.ZH_TW: 'man [命令]   - 顯示命令說明',
        Locale.EN_US: 'man [cmd]   - Display command manual',
    },
    'help_echo': {
        Locale.ZH_TW: 'echo [文字]  - 顯示文字',
        Locale.EN_US: 'echo [text] - Display text',
    },
    'help_uname': {
        Locale.ZH_TW: 'uname       - 顯示系統資訊',
        Locale.EN_US: 'uname       - Display system info',
    },
    'help_find': {
        Locale.ZH_TW: 'find        - 搜尋檔案或目錄',
        Locale.EN_US: 'find        - Search files or directories',
    },
    'help_mkdir': {
        Locale.ZH_TW: 'mkdir       - 建立目錄',
        Locale.EN_US: 'mkdir       - Create directory',
    },
    'help_touch': {
        Locale.ZH_TW: 'touch       - 建立檔案',
        Locale.EN_US: 'touch       - Create file',
    },
    'help_chmod': {
        Locale.ZH_TW: 'chmod       - 變更檔案權限',
        Locale.EN_US: 'chmod       - Change file mode',
    },
    'help_chown': {
        Locale.ZH_TW: 'chown       - 變更檔案所有者',
        Locale.EN_US: 'chown       - Change file owner',
    },
    'help_sudo': {
        Locale.ZH_TW: 'sudo [命令]  - 以管理員身分執行命令',
        Locale.EN_US: 'sudo [cmd]  - Run a command as administrator',
    },
    'help_history': {
        Locale.ZH_TW: 'history     - 顯示命令歷史記錄',
        Locale.EN_US: 'history     - Show command history',
    },
    'help_github': {
        Locale.ZH_TW: 'github      - 顯示GitHub資訊',
        Locale.EN_US: 'github      - Display GitHub info',
    },
    'help_lang': {
        Locale.ZH_TW: 'lang        - 切換語言 (中文/英文)',
        Locale.EN_US: 'lang        - Change language (Chinese/English)',
    },
    'help_clear': {
        Locale.ZH_TW: 'clear       - 清除畫面',
        Locale.EN_US: 'clear       - Clear screen',
    },
    'help_exit': {
        Locale.ZH_TW: 'exit        - 離開終端機',
        Locale.EN_US: 'exit        - Exit terminal',
    },
    'help_shortcuts': {
        Locale.ZH_TW: '鍵盤快捷鍵:',
        Locale.EN_US: 'Keyboard shortcuts:',
    },
    'help_ctrl_c': {
        Locale.ZH_TW: 'Ctrl+C        - 中斷當前命令',
        Locale.EN_US: 'Ctrl+C        - Interrupt current command',
    },
    'help_ctrl_d': {
        Locale.ZH_TW: 'Ctrl+D        - 登出 (當輸入為空時)',
        Locale.EN_US: 'Ctrl+D        - Logout (when input is empty)',
    },
    'help_arrows': {
        Locale.ZH_TW: '↑/↓           - 瀏覽命令歷史記錄',
        Locale.EN_US: '↑/↓           - Browse command history',
    },

    # Dispatcher errors
    'err_cmd_not_found': {
        Locale.ZH_TW: '$1: 命令未找到，輸入 "help" 查看可用命令',
        Locale.EN_US: '$1: Command not found, type "help" to see available commands',
    },
    'err_invalid_option': {
        Locale.ZH_TW: "$1: 無效的選項 -- '$2'",
        Locale.EN_US: "$1: Invalid option -- '$2'",
    },
    'err_missing_operand': {
        Locale.ZH_TW: '$1: 缺少操作數',
        Locale.EN_US: '$1: missing operand',
    },
    'err_pipe_unsupported': {
        Locale.ZH_TW: '目前尚未支援管道功能 (|)',
        Locale.EN_US: 'Pipes (|) are not supported yet',
    },
    'err_redirect_unsupported': {
        Locale.ZH_TW: '目前尚未支援重定向功能 (> 或 >>)',
        Locale.EN_US: 'Redirection (> or >>) is not supported yet',
    },
    'err_internal': {
        Locale.ZH_TW: '$1: 發生內部錯誤',
        Locale.EN_US: '$1: internal error',
    },
    'hint_restricted_start': {
        Locale.ZH_TW: '提示: 輸入 "deviser start" 以啟動 deviser 服務',
        Locale.EN_US: 'Tip: Type "deviser start" to start deviser service',
    },
    'hint_restricted_help': {
        Locale.ZH_TW: '輸入 "help" 查看基本命令列表',
        Locale.EN_US: 'Type "help" to see basic command list',
    },
    'interrupted': {
        Locale.ZH_TW: '^C',
        Locale.EN_US: '^C',
    },

    # Filesystem commands
    'err_no_such_dir': {
        Locale.ZH_TW: '$1: $2: 沒有此目錄',
        Locale.EN_US: '$1: $2: No such directory',
    },
    'err_no_such_file': {
        Locale.ZH_TW: '$1: $2: 檔案不存在',
        Locale.EN_US: '$1: $2: No such file',
    },
    'err_cannot_access': {
        Locale.ZH_TW: "$1: 無法存取 '$2': 沒有此檔案或目錄",
        Locale.EN_US: "$1: cannot access '$2': No such file or directory",
    },
    'err_perm_denied': {
        Locale.ZH_TW: '$1: $2: 權限不足',
        Locale.EN_US: '$1: $2: Permission denied',
    },
    'err_no_previous_dir': {
        Locale.ZH_TW: 'cd: 沒有先前的目錄',
        Locale.EN_US: 'cd: no previous directory',
    },
    'err_cat_missing': {
        Locale.ZH_TW: 'cat: 缺少檔案名稱',
        Locale.EN_US: 'cat: missing file name',
    },
    'err_touch_missing': {
        Locale.ZH_TW: 'touch: 缺少檔案操作數',
        Locale.EN_US: 'touch: missing file operand',
    },
    'err_mkdir_missing': {
        Locale.ZH_TW: 'mkdir: 缺少目錄操作數',
        Locale.EN_US: 'mkdir: missing operand',
    },
    'err_mkdir_denied': {
        Locale.ZH_TW: "mkdir: 無法建立目錄 '$1': 權限不足",
        Locale.EN_US: "mkdir: cannot create directory '$1': Permission denied",
    },
    'touch_done': {
        Locale.ZH_TW: "已創建 '$1'",
        Locale.EN_US: "created '$1'",
    },
    'mkdir_done': {
        Locale.ZH_TW: "已創建目錄 '$1'",
        Locale.EN_US: "created directory '$1'",
    },
    'err_chmod_mode': {
        Locale.ZH_TW: "chmod: 無效的模式: '$1'",
        Locale.EN_US: "chmod: invalid mode: '$1'",
    },
    'chmod_done': {
        Locale.ZH_TW: "已更改 '$1' 的權限",
        Locale.EN_US: "mode of '$1' changed",
    },
    'err_chown_root': {
        Locale.ZH_TW: 'chown: 需要系統管理員權限',
        Locale.EN_US: 'chown: requires administrator privileges',
    },
    'chown_done': {
        Locale.ZH_TW: "已更改 '$1' 的所有者為 '$2'",
        Locale.EN_US: "ownership of '$1' changed to '$2'",
    },
    'err_rm_refused': {
        Locale.ZH_TW: 'rm: 危險操作已被系統攔截，請小心使用刪除命令！',
        Locale.EN_US: 'rm: dangerous operation intercepted, please use delete commands with care!',
    },
    'err_find_missing': {
        Locale.ZH_TW: 'find: 缺少路徑和表達式',
        Locale.EN_US: 'find: missing path and expression',
    },
    'err_find_unsupported': {
        Locale.ZH_TW: '目前尚未支援 find 命令的完整功能',
        Locale.EN_US: 'find: full functionality is not supported yet',
    },

    # man
    'err_man_missing': {
        Locale.ZH_TW: '你必須指定一個手冊頁。',
        Locale.EN_US: 'What manual page do you want?',
    },
    'err_man_unknown': {
        Locale.ZH_TW: '沒有 $1 的手冊頁。',
        Locale.EN_US: 'No manual entry for $1',
    },

    # sudo
    'err_sudo_missing': {
        Locale.ZH_TW: 'sudo: 缺少要執行的命令',
        Locale.EN_US: 'sudo: missing command to run',
    },
    'sudo_prompt': {
        Locale.ZH_TW: '[sudo] $1 的密碼:',
        Locale.EN_US: '[sudo] password for $1:',
    },
    'err_sudo_failed': {
        Locale.ZH_TW: 'sudo: 認證失敗',
        Locale.EN_US: 'sudo: authentication failed',
    },
    'err_sudo_lockout': {
        Locale.ZH_TW: 'sudo: $1 次錯誤的密碼嘗試',
        Locale.EN_US: 'sudo: $1 incorrect password attempts',
    },

    # lang
    'lang_current': {
        Locale.ZH_TW: '目前語言：繁體中文',
        Locale.EN_US: 'Current language: English',
    },
    'lang_usage': {
        Locale.ZH_TW: '用法: lang [zh|en]',
        Locale.EN_US: 'Usage: lang [zh|en]',
    },
    'lang_changed': {
        Locale.ZH_TW: '語言已切換為中文',
        Locale.EN_US: 'Language changed to English',
    },
    'err_lang_invalid': {
        Locale.ZH_TW: "無效的選項 -- '$1'",
        Locale.EN_US: "Invalid option -- '$1'",
    },

    # Session end
    'sys_logout': {
        Locale.ZH_TW: 'logout',
        Locale.EN_US: 'logout',
    },
    'sys_goodbye': {
        Locale.ZH_TW: '感謝使用終端機風格個人網站，再見！',
        Locale.EN_US: 'Thank you for using terminal-style portfolio website. Goodbye!',
    },

    # Navigation hints
    'nav_switch_to_dir': {
        Locale.ZH_TW: '切換到 $1 目錄查看更多資訊',
        Locale.EN_US: 'Switch to $1 directory to see more information',
    },
    'nav_use_cd': {
        Locale.ZH_TW: '使用 "cd $1" 命令',
        Locale.EN_US: 'Use "cd $1" command',
    },
    'nav_use_ls': {
        Locale.ZH_TW: '請使用 "ls" 查看可用檔案，並使用 "cat [檔案名]" 閱讀內容',
        Locale.EN_US: 'Please use "ls" to see available files, and "cat [filename]" to read content',
    },
    'nav_example': {
        Locale.ZH_TW: '例如: $1',
        Locale.EN_US: 'Example: $1',
    },
    'nav_section_title': {
        Locale.ZH_TW: '====== $1 ======',
        Locale.EN_US: '====== $1 ======',
    },
    'section_about': {
        Locale.ZH_TW: '關於我',
        Locale.EN_US: 'About Me',
    },
    'section_skills': {
        Locale.ZH_TW: '技能',
        Locale.EN_US: 'Skills',
    },
    'section_projects': {
        Locale.ZH_TW: '專案列表',
        Locale.EN_US: 'Project List',
    },
    'section_contact': {
        Locale.ZH_TW: '聯絡方式',
        Locale.EN_US: 'Contact Information',
    },

    # deviser service
    'err_deviser_usage': {
        Locale.ZH_TW: 'deviser: 用法: deviser start',
        Locale.EN_US: 'deviser: usage: deviser start',
    },
    'service_starting': {
        Locale.ZH_TW: '正在啟動 deviser 服務...',
        Locale.EN_US: 'Starting deviser service...',
    },
    'boot_kernel': {
        Locale.ZH_TW: '正在初始化系統核心 [v$1]...',
        Locale.EN_US: 'Initializing system kernel [v$1]...',
    },
    'boot_modules': {
        Locale.ZH_TW: '載入核心模組... [OK]',
        Locale.EN_US: 'Loading kernel modules... [OK]',
    },
    'boot_dependencies': {
        Locale.ZH_TW: '檢查系統依賴關係... [OK]',
        Locale.EN_US: 'Checking system dependencies... [OK]',
    },
    'boot_profile': {
        Locale.ZH_TW: '載入使用者設定檔 [$1]... [OK]',
        Locale.EN_US: 'Loading user profile [$1]... [OK]',
    },
    'boot_ready': {
        Locale.ZH_TW: '系統已就緒! 啟動完成。',
        Locale.EN_US: 'System ready! Boot complete.',
    },
    'service_started': {
        Locale.ZH_TW: 'deviser 服務已啟動！',
        Locale.EN_US: 'deviser service started!',
    },
    'service_ready': {
        Locale.ZH_TW: '✓ deviser 服務已成功啟動！輸入 "help" 查看可用命令。',
        Locale.EN_US: '✓ deviser service started successfully! Type "help" to see available commands.',
    },
    'service_already': {
        Locale.ZH_TW: 'deviser 服務已經啟動！',
        Locale.EN_US: 'deviser service already started!',
    },

    # Resume download
    'download_preparing': {
        Locale.ZH_TW: '準備下載 $1...',
        Locale.EN_US: 'Preparing to download $1...',
    },
    'download_progress': {
        Locale.ZH_TW: '正在下載 $1...',
        Locale.EN_US: 'Downloading $1...',
    },
    'download_complete': {
        Locale.ZH_TW: '下載完成！檔案已儲存至您的系統。',
        Locale.EN_US: 'Download complete! File saved to your system.',
    },

    # Decoy deletion
    'decoy_deleting': {
        Locale.ZH_TW: '正在刪除檔案...請稍候',
        Locale.EN_US: 'Deleting files...please wait',
    },
    'decoy_progress': {
        Locale.ZH_TW: '已處理 $1%: $2',
        Locale.EN_US: 'Processed $1%: $2',
    },
    'decoy_err_dpkg': {
        Locale.ZH_TW: "rm: 無法刪除 '/var/lib/dpkg': 權限不足",
        Locale.EN_US: "rm: cannot remove '/var/lib/dpkg': Permission denied",
    },
    'decoy_err_passwd': {
        Locale.ZH_TW: "rm: 無法移除 '/etc/passwd': 操作不允許",
        Locale.EN_US: "rm: cannot remove '/etc/passwd': Operation not permitted",
    },
    'decoy_err_boot': {
        Locale.ZH_TW: "rm: 無法刪除 '/boot': 設備或資源忙碌中",
        Locale.EN_US: "rm: cannot remove '/boot': Device or resource busy",
    },
    'decoy_files': {
        Locale.ZH_TW: '已刪除 784 個檔案 (佔用 1.2GB)',
        Locale.EN_US: 'Deleted 784 files (1.2GB)',
    },
    'decoy_dirs': {
        Locale.ZH_TW: '已刪除 46 個目錄',
        Locale.EN_US: 'Deleted 46 directories',
    },
    'decoy_completed': {
        Locale.ZH_TW: '操作已完成，用時 5.72 秒',
        Locale.EN_US: 'Operation completed in 5.72 seconds',
    },
    'decoy_skipped': {
        Locale.ZH_TW: '已跳過 3 個無法訪問的檔案',
        Locale.EN_US: 'Skipped 3 inaccessible files',
    },
    'decoy_kernel_warning': {
        Locale.ZH_TW: '[$1] kernel: [警告] 檢測到潛在的系統破壞嘗試',
        Locale.EN_US: '[$1] kernel: [WARNING] potential system destruction attempt detected',
    },
    'decoy_danger': {
        Locale.ZH_TW: '警告: 系統檢測到危險操作！',
        Locale.EN_US: 'WARNING: dangerous operation detected!',
    },
    'decoy_guard': {
        Locale.ZH_TW: 'systemd-guard[1234]: 防護機制已啟動，進程ID 5678',
        Locale.EN_US: 'systemd-guard[1234]: protection engaged, PID 5678',
    },
    'decoy_restoring': {
        Locale.ZH_TW: '[$1] kernel: 正在還原系統檔案...',
        Locale.EN_US: '[$1] kernel: restoring system files...',
    },
    'decoy_blocked': {
        Locale.ZH_TW: 'systemd[1]: 錯誤：已阻止刪除系統關鍵檔案',
        Locale.EN_US: 'systemd[1]: error: deletion of critical system files blocked',
    },
    'decoy_loading_guard': {
        Locale.ZH_TW: 'bash: 正在載入防護措施...',
        Locale.EN_US: 'bash: loading countermeasures...',
    },
    'decoy_rick_rolled': {
        Locale.ZH_TW: '安全模組啟動：你已被 Rick Roll 了！',
        Locale.EN_US: "Security module engaged: You've been Rick Rolled!",
    },
    'decoy_snapshot_restored': {
        Locale.ZH_TW: '[防護系統] $1@$2: 快照還原完成。',
        Locale.EN_US: '[Guard] $1@$2: snapshot restore complete.',
    },
    'decoy_files_restored': {
        Locale.ZH_TW: '所有檔案已從時間點 $1 還原。',
        Locale.EN_US: 'All files restored from point in time $1.',
    },
    'decoy_be_careful': {
        Locale.ZH_TW: '下次請小心使用危險命令！系統管理員已被通知。',
        Locale.EN_US: 'Be careful with dangerous commands next time! The administrator has been notified.',
    },
    'decoy_reveal': {
        Locale.ZH_TW: '防護模組：哈哈，你的檔案沒有真的被刪除。感謝使用 DeviOS 安全防護！',
        Locale.EN_US: 'Guard module: Haha, your files were not really deleted. Thanks for using DeviOS protection!',
    },

    # github
    'github_title': {
        Locale.ZH_TW: '====== GitHub 資訊 ======',
        Locale.EN_US: '====== GitHub Info ======',
    },
    'github_user': {
        Locale.ZH_TW: '用戶名: Thetoicxdude',
        Locale.EN_US: 'Username: Thetoicxdude',
    },
    'github_profile': {
        Locale.ZH_TW: '個人檔案: https://github.com/Thetoicxdude',
        Locale.EN_US: 'Profile: https://github.com/Thetoicxdude',
    },
    'github_repos': {
        Locale.ZH_TW: '儲存庫數量: 11',
        Locale.EN_US: 'Repositories: 11',
    },
    'github_achievements': {
        Locale.ZH_TW: '成就: Pull Shark',
        Locale.EN_US: 'Achievements: Pull Shark',
    },
    'github_projects': {
        Locale.ZH_TW: '主要專案:',
        Locale.EN_US: 'Main projects:',
    },
    'github_project_ai': {
        Locale.ZH_TW: '- Ai-transformer: AI 模型研究',
        Locale.EN_US: '- Ai-transformer: AI model research',
    },
    'github_project_crowdfunding': {
        Locale.ZH_TW: '- crowdfunding-platform: 眾籌平台',
        Locale.EN_US: '- crowdfunding-platform: Crowdfunding platform',
    },
    'github_project_sentiment': {
        Locale.ZH_TW: '- Implicit-sentiment-analysis-model: 情感分析',
        Locale.EN_US: '- Implicit-sentiment-analysis-model: Sentiment analysis',
    },
    'github_project_bot': {
        Locale.ZH_TW: '- Zu-discord-bot: Discord 機器人',
        Locale.EN_US: '- Zu-discord-bot: Discord bot',
    },
    'github_more': {
        Locale.ZH_TW: '可以使用 "cd .github" 和 "cat profile.txt" 查看更多資訊',
        Locale.EN_US: 'Use "cd .github" and "cat profile.txt" for more information',
    },
}


def text(key: str, locale: Locale, *params: object) -> str:
    """
    Look up a message and substitute its positional parameters.

    Falls back to the default locale, then to the key itself, so a missing
    translation never raises.

    Args:
        key: Message id
        locale: Locale to render in
        *params: Values for ``$1``, ``$2`` ...

    Returns:
        Rendered message
    """
    variants: Optional[dict[Locale, str]] = MESSAGES.get(key)
    if variants is None:
        message = key
    else:
        message = variants.get(locale, variants[DEFAULT_LOCALE])

    for index, param in enumerate(params, start=1):
        message = message.replace(f"${index}", str(param))

    return message
