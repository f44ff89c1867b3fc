from elm_review_action.main import main

main()
