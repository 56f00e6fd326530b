"""
Portfolio Tree

The fixed directory tree served by the terminal: biography, skills,
projects, contact details and GitHub profile, each file with Traditional
Chinese content and, where written, an English variant.

Author: Deviser
Version: 1.0.0
"""

from typing import Optional, List

from devios.i18n import Locale
from .node import Node


def _file(zh: List[str], en: Optional[List[str]], owner: str, group: str) -> Node:
    translations = {Locale.EN_US: en} if en is not None else None
    return Node.file(zh, owner, group, translations=translations)


def _readme(lines: List[str], owner: str, group: str) -> Node:
    return Node.directory({'README.md': _file(lines, None, owner, group)}, owner, group)


def build_tree(owner: str = 'deviser', group: str = 'users') -> Node:
    """
    Build the portfolio tree.

    Args:
        owner: Owner of every node
        group: Group of every node

    Returns:
        Root directory node (``~``)
    """
    about = Node.directory({
        'bio.txt': _file(
            [
                '====== 關於我 ======',
                '我是一名熱衷於前端與全端開發的軟體工程師，擁有豐富的網頁應用開發經驗。',
                '我熱愛創造直覺且美觀的使用者介面，並且重視程式碼品質與使用者體驗。',
                '在工作之外，我也是開源專案的貢獻者，喜歡分享知識並持續學習新技術。',
                '我的GitHub: https://github.com/Thetoicxdude',
            ],
            [
                '====== About Me ======',
                'I am a software engineer passionate about frontend and full-stack development, '
                'with extensive experience in web application development.',
                'I love creating intuitive and beautiful user interfaces, and I value code quality '
                'and user experience.',
                'Outside of work, I am also an open-source contributor, enjoying knowledge sharing '
                'and continuously learning new technologies.',
                'My GitHub: https://github.com/Thetoicxdude',
            ],
            owner, group
        ),
        'education.txt': _file(
            [
                '====== 教育背景 ======',
                '2019-2023 - 計算機科學學士',
                '主修領域：軟體工程、網頁開發、人工智能',
            ],
            [
                '====== Education ======',
                '2019-2023 - Bachelor of Computer Science',
                'Major fields: Software Engineering, Web Development, Artificial Intelligence',
            ],
            owner, group
        ),
        'experience.txt': _file(
            [
                '====== 工作經驗 ======',
                '2022-至今 - 高級前端開發者',
                '2020-2022 - 網頁開發實習生',
                '主要職責：開發與維護企業級網頁應用，設計用戶介面，優化前端性能',
            ],
            [
                '====== Work Experience ======',
                '2022-Present - Senior Frontend Developer',
                '2020-2022 - Web Development Intern',
                'Main responsibilities: Developing and maintaining enterprise web applications, '
                'designing user interfaces, optimizing frontend performance',
            ],
            owner, group
        ),
    }, owner, group)

    skills = Node.directory({
        'frontend.txt': _file(
            [
                '====== 前端技術 ======',
                'JavaScript/TypeScript ███████████ 95%',
                'React.js            ██████████  90%',
                'Vue.js              ████████    80%',
                'HTML/CSS            ███████████ 95%',
            ],
            [
                '====== Frontend Technologies ======',
                'JavaScript/TypeScript ███████████ 95%',
                'React.js            ██████████  90%',
                'Vue.js              ████████    80%',
                'HTML/CSS            ███████████ 95%',
            ],
            owner, group
        ),
        'backend.txt': _file(
            [
                '====== 後端技術 ======',
                'Node.js             ████████    80%',
                'Express             ███████     70%',
                'Python              ██████      60%',
                'Database            ████████    80%',
            ],
            [
                '====== Backend Technologies ======',
                'Node.js             ████████    80%',
                'Express             ███████     70%',
                'Python              ██████      60%',
                'Database            ████████    80%',
            ],
            owner, group
        ),
        'other.txt': _file(
            [
                '====== 其他技能 ======',
                'Git/GitHub          ██████████  90%',
                'Discord Bots        ████████    80%',
                'AI & ML             █████████   85%',
                'Linux               █████████   85%',
            ],
            [
                '====== Other Skills ======',
                'Git/GitHub          ██████████  90%',
                'Discord Bots        ████████    80%',
                'AI & ML             █████████   85%',
                'Linux               █████████   85%',
            ],
            owner, group
        ),
    }, owner, group)

    projects = Node.directory({
        'terminal-portfolio': _readme([
            '# 終端機風格個人網站',
            '使用 React 和 TypeScript 建立的終端機風格個人網站',
            '',
            '## 技術',
            '- React',
            '- TypeScript',
            '- Styled-Components',
            '',
            '## 功能',
            '- 互動式命令行介面',
            '- 主題切換',
            '- 響應式設計',
            '',
            '## 連結',
            'https://github.com/Thetoicxdude/terminal-portfolio',
        ], owner, group),
        'ai-transformer': _readme([
            '# AI Transformer',
            '實現和研究的Transformer模型專案',
            '',
            '## 技術',
            '- Python',
            '- PyTorch',
            '- 自然語言處理',
            '',
            '## 功能',
            '- 實現transformer架構',
            '- 文本處理與分析',
            '- 模型訓練與評估',
            '',
            '## 連結',
            'https://github.com/Thetoicxdude/Ai-transformer',
        ], owner, group),
        'crowdfunding-platform': _readme([
            '# 眾籌平台',
            '現代化的眾籌網站平台',
            '',
            '## 技術',
            '- JavaScript',
            '- React',
            '- Node.js',
            '- 支付整合',
            '',
            '## 功能',
            '- 專案創建與展示',
            '- 支付系統整合',
            '- 用戶認證',
            '- 專案管理儀表板',
            '',
            '## 連結',
            'https://github.com/Thetoicxdude/crowdfunding-platform',
        ], owner, group),
        'implicit-sentiment-analysis': _readme([
            '# 隱含情感分析模型',
            '用於分析文本中隱含情感的AI模型',
            '',
            '## 技術',
            '- Python',
            '- 機器學習',
            '- 自然語言處理',
            '- 深度學習',
            '',
            '## 功能',
            '- 情感分析',
            '- 文本分類',
            '- 隱含情感檢測',
            '',
            '## 連結',
            'https://github.com/Thetoicxdude/Implicit-sentiment-analysis-model',
        ], owner, group),
        'starhub-server': _readme([
            '# Starhub Server',
            '使用GitHub Pages建立的網站專案',
            '',
            '## 技術',
            '- HTML',
            '- CSS',
            '- JavaScript',
            '- GitHub Pages',
            '',
            '## 功能',
            '- 靜態網站展示',
            '- 資訊頁面',
            '- 響應式設計',
            '',
            '## 連結',
            'https://github.com/Thetoicxdude/Starhub-Server-.github.io',
        ], owner, group),
        'zu-discord-bot': _readme([
            '# Zu Discord Bot',
            'Discord聊天機器人專案',
            '',
            '## 技術',
            '- JavaScript/TypeScript',
            '- Discord.js',
            '- Node.js',
            '',
            '## 功能',
            '- 聊天指令處理',
            '- 自動化任務',
            '- 互動式回應',
            '- 音樂播放與管理',
            '',
            '## 連結',
            'https://github.com/Thetoicxdude/Zu-discord-bot',
        ], owner, group),
    }, owner, group)

    contact = Node.directory({
        'info.txt': _file(
            [
                '====== 聯絡方式 ======',
                '📧 Email: yourname@example.com',
                '💼 LinkedIn: linkedin.com/in/yourprofile',
                '🐱 GitHub: https://github.com/Thetoicxdude',
                '🐦 Twitter: @yourhandle',
            ],
            [
                '====== Contact Information ======',
                '📧 Email: yourname@example.com',
                '💼 LinkedIn: linkedin.com/in/yourprofile',
                '🐱 GitHub: https://github.com/Thetoicxdude',
                '🐦 Twitter: @yourhandle',
            ],
            owner, group
        ),
        'social.txt': _file(
            [
                '====== 社交媒體 ======',
                'Instagram: @yourhandle',
                'Facebook: yourname',
                'Discord: yourname#1234',
            ],
            [
                '====== Social Media ======',
                'Instagram: @yourhandle',
                'Facebook: yourname',
                'Discord: yourname#1234',
            ],
            owner, group
        ),
    }, owner, group)

    github = Node.directory({
        'profile.txt': _file(
            [
                '====== GitHub 資訊 ======',
                '用戶名: Thetoicxdude',
                '個人檔案: https://github.com/Thetoicxdude',
                '儲存庫數量: 11',
                '追蹤者: 0',
                '追蹤中: 1',
                '成就: Pull Shark',
                '',
                '主要專案:',
                '- Ai-transformer',
                '- crowdfunding-platform',
                '- Implicit-sentiment-analysis-model',
                '- Starhub-Server-.github.io',
                '- Zu-discord-bot',
            ],
            None,
            owner, group
        ),
        'stats.txt': _file(
            [
                '====== GitHub 統計 ======',
                '主要語言: JavaScript, Python, HTML, TypeScript',
                '貢獻統計: 活躍貢獻者',
                '星標專案: 4',
                '',
                '最近活動:',
                '- 專案更新',
                '- 提交代碼',
                '- Fork了開源專案',
            ],
            None,
            owner, group
        ),
    }, owner, group)

    return Node.directory({
        'about': about,
        'skills': skills,
        'projects': projects,
        'contact': contact,
        '.github': github,
        'resume.pdf': _file(
            ['[PDF 文件內容 - 顯示為二進制]'],
            ['[PDF content - displayed as binary]'],
            owner, group
        ),
        '.bashrc': _file(
            [
                '# .bashrc',
                'PS1="\\[\\033[01;32m\\]\\u@\\h\\[\\033[00m\\]:\\[\\033[01;34m\\]\\w\\[\\033[00m\\]\\$ "',
                'alias ll="ls -la"',
                'alias la="ls -a"',
                'alias l="ls -CF"',
                'alias gh="cd ~/.github"',
            ],
            None,
            owner, group
        ),
    }, owner, group)
