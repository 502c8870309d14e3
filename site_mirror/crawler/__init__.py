# File: site_mirror/crawler/__init__.py
"""site_mirror.crawler: Обход сайта, загрузка документов и извлечение ссылок."""
