"""
Прикладной слой: порты и сервис управления бронированиями.
"""
