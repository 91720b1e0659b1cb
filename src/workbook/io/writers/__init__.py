"""Writers for rendered workbook bytes."""
