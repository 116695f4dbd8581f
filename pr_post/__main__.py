import sys

from pr_post.main import main

sys.exit(main())
