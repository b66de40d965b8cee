# Timecard services package
