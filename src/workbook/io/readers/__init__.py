"""Readers producing :class:`~workbook.models.ProductData`."""
