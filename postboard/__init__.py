"""postboard: blog posts, comments, users and tags behind a command/query core."""
