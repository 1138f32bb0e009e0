"""User-facing message catalogue.

Japanese is the default locale of the console; English is provided for
operators in other locales. Keys are shared across locales.
"""

MESSAGES = {
    "ja": {
        "list_failed": "ファイル一覧の取得に失敗しました。",
        "list_unexpected": "予期せぬエラーが発生しました。",
        "upload_no_file": "アップロードするファイルを選択してください。",
        "upload_failed": "ファイルのアップロードに失敗しました。",
        "upload_unexpected": "アップロード中にエラーが発生しました。",
        "download_failed": "{file_name}のダウンロードに失敗しました。",
        "download_unexpected": "ダウンロード中にエラーが発生しました。",
        "delete_failed": "ファイルの削除に失敗しました。",
        "delete_unexpected": "削除中にエラーが発生しました。",
        "file_not_found": "ファイルが見つかりません: {path}",
        "not_a_file": "ファイルではありません: {path}",
        "unknown_record": "一覧にないファイルです: {ref}",
        "title": "ファイルデータ管理",
        "subtitle": "ファイルのアップロード、ダウンロード、削除をバックエンド経由で安全に管理します。",
        "file_count": "ファイル数",
        "total_size": "合計サイズ",
        "last_updated": "最終更新",
        "column_name": "ファイル名",
        "column_size": "サイズ",
        "column_uploaded": "アップロード日時",
        "column_id": "ID",
        "empty": "保存されているファイルはありません。アップロードしてスタートしましょう。",
        "loading": "読み込み中...",
        "uploading": "アップロード中...",
        "downloading": "生成中...",
        "deleting": "削除中...",
        "selected": "選択中: {name} ({size} ・ {content_type})",
        "unknown_type": "形式不明",
        "no_selection": "最大5GBまで。ファイルを選択してください。",
        "description": "説明: {description}",
        "upload_done": "アップロードしました。",
        "download_done": "保存しました: {path}",
        "delete_done": "削除しました。",
        "error": "エラー: {message}",
    },
    "en": {
        "list_failed": "Failed to fetch the file list.",
        "list_unexpected": "An unexpected error occurred.",
        "upload_no_file": "Select a file to upload.",
        "upload_failed": "Failed to upload the file.",
        "upload_unexpected": "An error occurred while uploading.",
        "download_failed": "Failed to download {file_name}.",
        "download_unexpected": "An error occurred while downloading.",
        "delete_failed": "Failed to delete the file.",
        "delete_unexpected": "An error occurred while deleting.",
        "file_not_found": "File not found: {path}",
        "not_a_file": "Not a file: {path}",
        "unknown_record": "No file in the current listing matches: {ref}",
        "title": "File Data Console",
        "subtitle": "Upload, download and delete files safely through the backend.",
        "file_count": "Files",
        "total_size": "Total size",
        "last_updated": "Last updated",
        "column_name": "File name",
        "column_size": "Size",
        "column_uploaded": "Uploaded",
        "column_id": "ID",
        "empty": "No files stored yet. Upload one to get started.",
        "loading": "Loading...",
        "uploading": "Uploading...",
        "downloading": "Preparing...",
        "deleting": "Deleting...",
        "selected": "Selected: {name} ({size} · {content_type})",
        "unknown_type": "unknown type",
        "no_selection": "Up to 5GB. Select a file.",
        "description": "Description: {description}",
        "upload_done": "Uploaded.",
        "download_done": "Saved to: {path}",
        "delete_done": "Deleted.",
        "error": "Error: {message}",
    },
}

DEFAULT_LOCALE = "ja"


class Messages:
    """Lookup of message templates for one locale, falling back to the default."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale if locale in MESSAGES else DEFAULT_LOCALE

    def get(self, key: str, **kwargs) -> str:
        template = MESSAGES[self.locale].get(key) or MESSAGES[DEFAULT_LOCALE][key]
        return template.format(**kwargs) if kwargs else template
