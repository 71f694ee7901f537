from ops_assistant.services.chat_service import main

if __name__ == "__main__":
    main()
