from spanlisp.repl import step2_main

step2_main()
