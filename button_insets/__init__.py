"""Button Insets Lab: live editor for button content, image and title insets."""
