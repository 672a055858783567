"""Time ROI: score the return on time spent on an activity."""
